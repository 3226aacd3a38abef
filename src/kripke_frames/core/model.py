"""Read-only frame model contract consumed by the relation checks.

A model exposes a set of worlds and a successor lookup:

- ``get_states()`` returns an index-addressable sequence of presence flags.
  A falsy entry is a hole (deleted or unused index) and is skipped.
- ``get_successors_of(index)`` returns the ordered successor indices of a
  world, or ``None`` when the world has no outgoing edges. It must accept any
  index that appears as a successor value, present or not.
"""

from typing import Any, Protocol, Sequence

from kripke_frames.core.errors import ContractViolation

REQUIRED_METHODS = ("get_states", "get_successors_of")


class FrameModel(Protocol):
    def get_states(self) -> Sequence[Any]: ...

    def get_successors_of(self, index: int) -> Sequence[int] | None: ...


def require_frame_model(model: Any) -> None:
    """Raise ContractViolation unless model implements both lookups."""
    missing = [name for name in REQUIRED_METHODS if not callable(getattr(model, name, None))]
    if missing:
        raise ContractViolation(model, missing)


def successors_of(model: FrameModel, index: int) -> Sequence[int]:
    """Successors of a world, with a missing list read as no edges."""
    successors = model.get_successors_of(index)
    if successors is None:
        return ()
    return successors
