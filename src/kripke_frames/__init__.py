"""Kripke Frames - reflexivity, symmetry and transitivity checks for modal logic frames."""

__version__ = "0.1.0"

from kripke_frames.core.relations import is_reflexive, is_symmetric, is_transitive
from kripke_frames.core.errors import ContractViolation, FrameCheckResult
from kripke_frames.core.validator import FrameValidator
from kripke_frames.config.worksheet import WorksheetConfig

__all__ = [
    "is_reflexive",
    "is_symmetric",
    "is_transitive",
    "ContractViolation",
    "FrameCheckResult",
    "FrameValidator",
    "WorksheetConfig",
]
