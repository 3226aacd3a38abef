"""Domain-specific validation mixins for the frame validator."""

from kripke_frames.core.domain.frame_properties import FramePropertyValidationMixin

__all__ = [
    "FramePropertyValidationMixin",
]
