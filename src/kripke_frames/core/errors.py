"""Error types and check results for frame property validation."""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Literal


class ContractViolation(TypeError):
    """Raised when a model does not expose the capabilities the checks need."""

    def __init__(self, model: Any, missing: list[str]):
        self.model = model
        self.missing = missing
        super().__init__(
            f"{type(model).__name__} does not implement the frame model contract: "
            f"missing {', '.join(missing)}"
        )


@dataclass
class StructuredError:
    """Machine-processable error format for grading harnesses"""

    # Location info
    path: str  # "frame.reflexive"

    # Error classification
    code: str = ""  # "FRM-001"
    category: Literal["logic"] = "logic"
    severity: Literal["critical", "error", "warning"] = "error"
    message: str = ""

    # Machine-processable info
    expected: Any = None
    actual: Any = None
    valid_options: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "path": self.path,
            "code": self.code,
            "category": self.category,
            "severity": self.severity,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
            "valid_options": self.valid_options,
        }


@dataclass
class ValidationError:
    """A single failed (or merely noted) frame property"""
    path: str
    message: str
    severity: str = "error"

    code: str = ""
    expected: Any = None
    actual: Any = None
    valid_options: list[str] = dataclass_field(default_factory=list)

    def to_structured(self) -> StructuredError:
        """Convert to StructuredError"""
        return StructuredError(
            path=self.path,
            message=self.message,
            severity=self.severity if self.severity in ("critical", "error", "warning") else "error",
            code=self.code,
            category="logic",
            expected=self.expected,
            actual=self.actual,
            valid_options=self.valid_options,
        )


@dataclass
class FrameCheckResult:
    """Result of checking a model against a set of required frame properties."""
    valid: bool
    properties: dict[str, bool]
    required: tuple[str, ...] = ()
    systems: list[str] = dataclass_field(default_factory=list)
    errors: list[ValidationError] = dataclass_field(default_factory=list)
    warnings: list[ValidationError] = dataclass_field(default_factory=list)

    def to_structured_errors(self) -> list[StructuredError]:
        """Convert all errors to StructuredError format"""
        return [e.to_structured() for e in self.errors]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "valid": self.valid,
            "properties": dict(self.properties),
            "required": list(self.required),
            "systems": list(self.systems),
            "errors": [e.to_structured().to_dict() for e in self.errors],
            "warnings": [e.to_structured().to_dict() for e in self.warnings],
        }
