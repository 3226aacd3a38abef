"""Reflexivity, symmetry and transitivity checks over a frame's relation.

Each check walks present worlds in ascending index order and their
successors in sequence order, and returns False at the first counterexample.
Successor values are used as given: an index naming an absent world is still
a valid edge target and is dereferenced without a presence check.
"""

import logging
from typing import Callable, Iterator, Sequence

from kripke_frames.core.errors import ContractViolation
from kripke_frames.core.model import FrameModel, require_frame_model, successors_of

logger = logging.getLogger(__name__)

EdgePredicate = Callable[[int, int, Sequence[int]], bool]


def _present_worlds(model: FrameModel) -> Iterator[tuple[int, Sequence[int]]]:
    """Yield (index, successors) for every present world."""
    states = model.get_states()
    try:
        size = len(states)
    except TypeError as err:
        raise ContractViolation(model, ["get_states() returning a sequence"]) from err
    for i in range(size):
        if not states[i]:
            continue
        yield i, successors_of(model, i)


def _find_counterexample(model: FrameModel, holds: EdgePredicate) -> tuple[int, int] | None:
    """First edge (i, j) for which holds(i, j, successors(i)) is False."""
    for i, direct in _present_worlds(model):
        for j in direct:
            if not holds(i, j, direct):
                return i, j
    return None


def is_reflexive(model: FrameModel) -> bool:
    """Every present world sees itself."""
    require_frame_model(model)
    for i, direct in _present_worlds(model):
        if i not in direct:
            logger.debug("not reflexive: world %d has no self-loop", i)
            return False
    return True


def is_symmetric(model: FrameModel) -> bool:
    """Every edge i -> j has a back edge j -> i."""
    require_frame_model(model)
    counterexample = _find_counterexample(
        model, lambda i, j, direct: i in successors_of(model, j)
    )
    if counterexample is not None:
        logger.debug("not symmetric: edge %d -> %d has no back edge", *counterexample)
        return False
    return True


def is_transitive(model: FrameModel) -> bool:
    """Every two-step path i -> mid -> end has a direct edge i -> end."""
    require_frame_model(model)
    counterexample = _find_counterexample(
        model, lambda i, mid, direct: all(end in direct for end in successors_of(model, mid))
    )
    if counterexample is not None:
        logger.debug("not transitive: path through %d -> %d has no direct shortcut", *counterexample)
        return False
    return True


PROPERTY_CHECKS: dict[str, Callable[[FrameModel], bool]] = {
    "reflexive": is_reflexive,
    "symmetric": is_symmetric,
    "transitive": is_transitive,
}
