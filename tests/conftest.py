"""Shared fixtures for frame check tests."""

import pytest


class ListModel:
    """Minimal frame model backed by plain lists.

    ``states[i]`` is the presence flag of world i; ``edges`` maps a world
    index to its successor list. Indices missing from ``edges`` have no
    successor list at all.
    """

    def __init__(self, states, edges=None):
        self.states = list(states)
        self.edges = {i: list(succ) if succ is not None else None for i, succ in (edges or {}).items()}
        self.lookups = []

    def get_states(self):
        return self.states

    def get_successors_of(self, index):
        self.lookups.append(index)
        return self.edges.get(index)


@pytest.fixture
def make_model():
    """Build a ListModel from presence flags and an edge mapping"""
    return ListModel
