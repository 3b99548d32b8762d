"""Result and option types shared by the component and message validators."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ValidationCode(str, Enum):
    """Stable issue codes. Members compare equal to their string values."""

    MISSING_SURFACE_ID = "MISSING_SURFACE_ID"
    MISSING_CATALOG_ID = "MISSING_CATALOG_ID"
    INVALID_PRIMARY_COLOR = "INVALID_PRIMARY_COLOR"
    INVALID_COMPONENTS = "INVALID_COMPONENTS"
    MISSING_COMPONENT_ID = "MISSING_COMPONENT_ID"
    DUPLICATE_COMPONENT_ID = "DUPLICATE_COMPONENT_ID"
    MISSING_COMPONENT_TYPE = "MISSING_COMPONENT_TYPE"
    UNKNOWN_COMPONENT_TYPE = "UNKNOWN_COMPONENT_TYPE"
    MISSING_ROOT_COMPONENT = "MISSING_ROOT_COMPONENT"
    MISSING_REQUIRED_PROPERTY = "MISSING_REQUIRED_PROPERTY"
    INVALID_OP = "INVALID_OP"
    UNNECESSARY_VALUE = "UNNECESSARY_VALUE"
    MISSING_VALUE = "MISSING_VALUE"
    INVALID_MESSAGE_TYPE = "INVALID_MESSAGE_TYPE"
    # Action shape does not match the protocol version (strict mode)
    INVALID_ACTION_SHAPE = "INVALID_ACTION_SHAPE"
    # v0.8 only
    MISSING_ROOT = "MISSING_ROOT"
    INVALID_CONTENTS = "INVALID_CONTENTS"


@dataclass(frozen=True)
class ValidationIssue:
    """A single finding.

    Attributes:
        code: Stable issue code.
        message: Human-readable description.
        path: Dotted location such as ``updateComponents.components[0].id``,
            or None for message-level issues.
    """

    code: ValidationCode
    message: str
    path: str | None = None

    def with_prefix(self, prefix: str) -> "ValidationIssue":
        """Return a copy whose path is nested under ``prefix``."""
        path = f"{prefix}.{self.path}" if self.path else prefix
        return type(self)(code=self.code, message=self.message, path=path)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.path is not None:
            data["path"] = self.path
        return data


@dataclass(frozen=True)
class ValidationError(ValidationIssue):
    """An issue that makes the input invalid."""


@dataclass(frozen=True)
class ValidationWarning(ValidationIssue):
    """An advisory issue; never affects validity."""


@dataclass
class ValidationResult:
    """Accumulated errors and warnings for one validation call.

    Example:
        >>> result = validate_message({"createSurface": {"surfaceId": "s"}})
        >>> result.valid
        False
        >>> [e.code for e in result.errors]
        [<ValidationCode.MISSING_CATALOG_ID: 'MISSING_CATALOG_ID'>]
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def error(self, code: ValidationCode, message: str, path: str | None = None) -> None:
        self.errors.append(ValidationError(code=code, message=message, path=path))

    def warn(self, code: ValidationCode, message: str, path: str | None = None) -> None:
        self.warnings.append(ValidationWarning(code=code, message=message, path=path))

    def extend(self, other: "ValidationResult", prefix: str | None = None) -> None:
        """Append another result's issues, optionally nesting their paths."""
        if prefix is None:
            self.errors.extend(other.errors)
            self.warnings.extend(other.warnings)
            return
        self.errors.extend(e.with_prefix(prefix) for e in other.errors)
        self.warnings.extend(w.with_prefix(prefix) for w in other.warnings)

    def codes(self) -> list[ValidationCode]:
        """Error codes in emission order."""
        return [e.code for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }


class ValidationOptions(BaseModel):
    """Per-call validation configuration.

    Attributes:
        strict: Report unknown component kinds, a missing ``root`` component
            and mismatched action shapes as warnings.
        allowed_components: Custom kinds that strict mode should not warn about.
    """

    strict: bool = Field(default=False, description="Enable advisory warnings")
    allowed_components: tuple[str, ...] | None = Field(
        default=None,
        alias="allowedComponents",
        description="Custom component kinds accepted without warning",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def allows(self, kind: str) -> bool:
        """Check whether a non-standard kind is on the allow-list."""
        return self.allowed_components is not None and kind in self.allowed_components

    @classmethod
    def coerce(
        cls, options: "ValidationOptions | Mapping[str, Any] | None"
    ) -> "ValidationOptions":
        """Accept an options instance, a plain mapping, or None for defaults."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


__all__ = [
    "ValidationCode",
    "ValidationIssue",
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    "ValidationOptions",
]
