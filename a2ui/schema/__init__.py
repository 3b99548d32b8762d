"""Schema module - authoritative registry of A2UI standard component kinds.

This module provides:
- The closed ComponentType enum and per-kind metadata
- The required-property table, per protocol version
- Catalog export for tooling

Example usage:
    >>> from a2ui.schema import required_fields_for, is_standard_kind
    >>> required_fields_for("Button")
    ['child', 'action']
    >>> is_standard_kind("Chart")
    False
"""

from .lib import (
    COMPONENT_REGISTRY,
    DEFAULT_PROTOCOL_VERSION,
    ComponentCategory,
    ComponentMeta,
    ComponentType,
    PropertyRequirement,
    ProtocolVersion,
    export_catalog_summary,
    get_component_meta,
    get_components_by_category,
    get_requirements,
    is_standard_kind,
    required_fields_for,
    resolve_component_type,
)

__all__ = [
    # Enums
    "ProtocolVersion",
    "DEFAULT_PROTOCOL_VERSION",
    "ComponentCategory",
    "ComponentType",
    # Metadata
    "PropertyRequirement",
    "ComponentMeta",
    "COMPONENT_REGISTRY",
    # Lookup functions
    "resolve_component_type",
    "is_standard_kind",
    "get_component_meta",
    "get_requirements",
    "required_fields_for",
    "get_components_by_category",
    # Export
    "export_catalog_summary",
]
