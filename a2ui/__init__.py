"""a2ui: Validation and building of A2UI protocol messages."""

from a2ui.builders import IdGenerator, create_messages
from a2ui.conformance import SchemaValidator, validate_with_schema
from a2ui.schema import ComponentType, ProtocolVersion, export_catalog_summary
from a2ui.validation import (
    ValidationCode,
    ValidationOptions,
    ValidationResult,
    is_valid,
    validate_components,
    validate_message,
    validate_messages,
)

__all__ = [
    # Schema
    "ComponentType",
    "ProtocolVersion",
    "export_catalog_summary",
    # Validation
    "ValidationCode",
    "ValidationOptions",
    "ValidationResult",
    "validate_message",
    "validate_messages",
    "validate_components",
    "is_valid",
    # Conformance
    "SchemaValidator",
    "validate_with_schema",
    # Builders
    "IdGenerator",
    "create_messages",
]
