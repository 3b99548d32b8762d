"""Validation module for A2UI messages and component lists.

Provides validation functions to detect structural and semantic issues in
protocol messages before they reach a renderer.

Example:
    >>> from a2ui.validation import validate_message, validate_messages
    >>> result = validate_message({"createSurface": {"surfaceId": "s1"}})
    >>> [e.code.value for e in result.errors]
    ['MISSING_CATALOG_ID']
"""

from .components import validate_components
from .lib import (
    is_valid,
    validate_message,
    validate_messages,
    validate_v08_message,
    validate_v09_message,
)
from .models import (
    ValidationCode,
    ValidationError,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    # Models
    "ValidationCode",
    "ValidationIssue",
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    "ValidationOptions",
    # Functions
    "validate_components",
    "validate_message",
    "validate_v09_message",
    "validate_v08_message",
    "validate_messages",
    "is_valid",
]
