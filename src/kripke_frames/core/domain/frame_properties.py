"""Frame property validation mixin for the frame validator."""

from kripke_frames.core.errors import ValidationError
from kripke_frames.core.model import FrameModel
from kripke_frames.core.relations import PROPERTY_CHECKS

# FRM-xxx: Frame property errors
PROPERTY_CODES = {
    "reflexive": "FRM-001",
    "symmetric": "FRM-002",
    "transitive": "FRM-003",
}

PROPERTY_MESSAGES = {
    "reflexive": "Relation is not reflexive: some world does not see itself",
    "symmetric": "Relation is not symmetric: some edge has no back edge",
    "transitive": "Relation is not transitive: some two-step path has no direct edge",
}


class FramePropertyValidationMixin:
    """Mixin providing frame property validation methods."""

    def _evaluate_properties(self, model: FrameModel) -> dict[str, bool]:
        """Run every property check once against the model"""
        return {name: check(model) for name, check in PROPERTY_CHECKS.items()}

    def _validate_frame_properties(
        self,
        properties: dict[str, bool],
        required: tuple[str, ...],
        warn_unrequired: bool = False,
    ) -> tuple[list[ValidationError], list[ValidationError]]:
        """Turn property verdicts into errors (required) and warnings (the rest)"""
        errors = []
        warnings = []

        for name, holds in properties.items():
            if holds:
                continue
            if name in required:
                errors.append(ValidationError(
                    path=f"frame.{name}",
                    message=PROPERTY_MESSAGES[name],
                    code=PROPERTY_CODES[name],
                    expected=True,
                    actual=False,
                ))
            elif warn_unrequired:
                warnings.append(ValidationError(
                    path=f"frame.{name}",
                    message=PROPERTY_MESSAGES[name],
                    severity="warning",
                    code=PROPERTY_CODES[name],
                    expected=True,
                    actual=False,
                ))

        return errors, warnings
