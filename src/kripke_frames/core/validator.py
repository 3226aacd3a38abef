"""Frame validator used by worksheet grading."""

import logging
from pathlib import Path
from typing import Iterable

from kripke_frames.config.worksheet import REPORT_FORMATS, WorksheetConfig
from kripke_frames.core.domain import FramePropertyValidationMixin
from kripke_frames.core.errors import FrameCheckResult
from kripke_frames.core.model import FrameModel, require_frame_model
from kripke_frames.core.report import render
from kripke_frames.core.systems import expand_requirements, satisfied_systems

logger = logging.getLogger(__name__)


class FrameValidator(FramePropertyValidationMixin):
    """Checks a frame model against required properties or frame systems"""

    def __init__(self, base_dir: Path | None = None, config: dict | None = None):
        self.config = config if config is not None else WorksheetConfig(base_dir).load()
        # Bad config values raise here
        self.default_required = expand_requirements(self.config.get("required", []))
        self.warn_unrequired = self.config.get("warn_unrequired", False)
        if not isinstance(self.warn_unrequired, bool):
            raise ValueError(f"'warn_unrequired' must be true or false, got {self.warn_unrequired!r}")
        self.report_format = self.config.get("report_format", "yaml")
        if self.report_format not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format '{self.report_format}' (expected one of: {', '.join(REPORT_FORMATS)})")

    def validate(self, model: FrameModel, required: Iterable[str] | None = None) -> FrameCheckResult:
        """
        Check a model's relation.

        Args:
            model: Object implementing get_states() and get_successors_of(i)
            required: Property or system names that must hold. Falls back to
                the worksheet config when omitted.

        Returns:
            FrameCheckResult with per-property verdicts, satisfied systems,
            and an error for every required property that fails

        Raises:
            ContractViolation: If model lacks the required lookups
            ValueError: If a required name is unknown
        """
        required_props = self.default_required if required is None else expand_requirements(required)
        require_frame_model(model)

        properties = self._evaluate_properties(model)
        errors, warnings = self._validate_frame_properties(
            properties, required_props, self.warn_unrequired
        )
        systems = satisfied_systems(properties)

        logger.info(
            "frame check: required=%s properties=%s systems=%s errors=%d",
            ",".join(required_props) or "-",
            ",".join(name for name, holds in properties.items() if holds) or "-",
            ",".join(systems),
            len(errors),
        )

        return FrameCheckResult(
            valid=len(errors) == 0,
            properties=properties,
            required=required_props,
            systems=systems,
            errors=errors,
            warnings=warnings,
        )

    def report(self, result: FrameCheckResult) -> str:
        """Render a result in the worksheet's configured report format"""
        return render(result, self.report_format)
