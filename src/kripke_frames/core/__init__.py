"""Core frame checking components."""

from kripke_frames.core.errors import ContractViolation, FrameCheckResult, StructuredError, ValidationError
from kripke_frames.core.model import FrameModel, require_frame_model, successors_of
from kripke_frames.core.relations import is_reflexive, is_symmetric, is_transitive
from kripke_frames.core.systems import FRAME_SYSTEMS, expand_requirements, satisfied_systems
from kripke_frames.core.validator import FrameValidator

__all__ = [
    "ContractViolation",
    "FrameCheckResult",
    "StructuredError",
    "ValidationError",
    "FrameModel",
    "require_frame_model",
    "successors_of",
    "is_reflexive",
    "is_symmetric",
    "is_transitive",
    "FRAME_SYSTEMS",
    "expand_requirements",
    "satisfied_systems",
    "FrameValidator",
]
