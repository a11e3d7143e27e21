"""Validation result value objects.

Immutable outcomes of validating one setting value or a whole
configuration against the settings catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ValidationErrorKind(str, Enum):
    """Category of a validation failure.

    Attributes:
        FORMAT: Value cannot be parsed as its declared type
        RANGE: Value parses but lies outside the declared domain
        DEPENDENCY: Value violates a relation to another setting's current value
        CONFLICT: Value clashes with a group of related settings
    """

    FORMAT = "format"
    RANGE = "range"
    DEPENDENCY = "dependency"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation failure."""

    kind: ValidationErrorKind
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.kind.value, "message": self.message}


@dataclass(frozen=True)
class ValidationOptions:
    """Caller-supplied switches for a validation call.

    Attributes:
        allow_override: Accept the value even when checks fail. Errors are
            still reported so the caller can audit the override.
        validate_dependencies: Run dependency rules (conflicts always run)
    """

    allow_override: bool = False
    validate_dependencies: bool = True


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one setting value.

    Attributes:
        is_valid: Whether the value may be applied
        errors: Every failed check, in check order (format, range,
            dependency, conflict)
        overridden: True when errors were accepted through allow_override
    """

    is_valid: bool
    errors: tuple[ValidationIssue, ...] = ()
    overridden: bool = False

    @classmethod
    def from_issues(
        cls, issues: list[ValidationIssue], allow_override: bool = False
    ) -> "ValidationResult":
        """Build a result from collected issues."""
        if not issues:
            return cls(is_valid=True)
        return cls(is_valid=allow_override, errors=tuple(issues), overridden=allow_override)

    def has_error(self, kind: ValidationErrorKind) -> bool:
        """Check whether any issue of the given kind was reported."""
        return any(issue.kind == kind for issue in self.errors)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation."""
        data: dict[str, Any] = {"isValid": self.is_valid}
        if self.errors:
            data["errors"] = [issue.to_dict() for issue in self.errors]
        if self.overridden:
            data["overridden"] = True
        return data


@dataclass(frozen=True)
class BatchValidationResult:
    """Outcome of validating a whole configuration.

    Attributes:
        is_valid: True when every entry is valid
        errors: Results of the failing entries only, keyed by setting code
    """

    is_valid: bool
    errors: Mapping[str, ValidationResult] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation."""
        data: dict[str, Any] = {"isValid": self.is_valid}
        if self.errors:
            data["errors"] = {code: result.to_dict() for code, result in self.errors.items()}
        return data
