"""Schema-driven cross-validation of A2UI messages.

Example usage:
    >>> from a2ui.conformance import validate_with_schema
    >>> result = validate_with_schema({"createSurface": {"surfaceId": "s1"}})
    >>> [(e.path, e.keyword) for e in result.errors]
    [('/createSurface', 'required')]
"""

from .lib import (
    PACKAGED_SCHEMA_DIR,
    SCHEMA_FILES,
    SchemaLoadError,
    SchemaValidationError,
    SchemaValidationResult,
    SchemaValidator,
    get_schema_validator,
    json_pointer,
    reset_schema_validator,
    validate_client_message,
    validate_messages_with_schema,
    validate_with_schema,
)

__all__ = [
    # Types
    "SchemaLoadError",
    "SchemaValidationError",
    "SchemaValidationResult",
    "SchemaValidator",
    # Locations
    "PACKAGED_SCHEMA_DIR",
    "SCHEMA_FILES",
    # Default instance
    "get_schema_validator",
    "reset_schema_validator",
    "validate_with_schema",
    "validate_client_message",
    "validate_messages_with_schema",
    # Helpers
    "json_pointer",
]
