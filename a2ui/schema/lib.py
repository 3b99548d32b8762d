"""Authoritative component registry for the A2UI standard catalog.

This module is the single source of truth for what the validator knows about
component kinds. It provides:
- The closed set of standard component kinds
- Per-kind metadata (category, description, required properties)
- Protocol version handling for the fields that were renamed between versions

All "is this kind known / what does it require" queries route through here.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ProtocolVersion(str, Enum):
    """Protocol revisions understood by the validator.

    - V0_8: nested components (``{"component": {"Text": {...}}}``),
      ``beginRendering`` / ``surfaceUpdate`` / ``dataModelUpdate`` messages,
      bare ``{name, context}`` actions.
    - V0_9: flat components (``{"component": "Text", ...}``),
      ``createSurface`` / ``updateComponents`` / ``updateDataModel`` messages,
      ``{event: {name, context}}`` actions.
    """

    V0_8 = "0.8"
    V0_9 = "0.9"

    @classmethod
    def parse(cls, value: "str | ProtocolVersion") -> "ProtocolVersion":
        """Parse "0.9", "v0.9" or "v0_9" style spellings.

        Raises:
            ValueError: If the value names no known version.
        """
        if isinstance(value, ProtocolVersion):
            return value
        normalized = str(value).strip().lower().lstrip("v").replace("_", ".")
        try:
            return cls(normalized)
        except ValueError:
            known = ", ".join(v.value for v in cls)
            raise ValueError(
                f"Unknown protocol version '{value}' (known: {known})"
            ) from None


DEFAULT_PROTOCOL_VERSION = ProtocolVersion.V0_9


class ComponentCategory(str, Enum):
    """High-level component groupings."""

    CONTENT = "content"
    LAYOUT = "layout"
    INTERACTIVE = "interactive"


class ComponentType(str, Enum):
    """The 18 kinds of the A2UI standard catalog."""

    # Content
    TEXT = "Text"
    IMAGE = "Image"
    ICON = "Icon"
    VIDEO = "Video"
    AUDIO_PLAYER = "AudioPlayer"

    # Layout
    ROW = "Row"
    COLUMN = "Column"
    LIST = "List"
    CARD = "Card"
    TABS = "Tabs"
    DIVIDER = "Divider"
    MODAL = "Modal"

    # Interactive
    BUTTON = "Button"
    CHECK_BOX = "CheckBox"
    TEXT_FIELD = "TextField"
    DATE_TIME_INPUT = "DateTimeInput"
    CHOICE_PICKER = "ChoicePicker"
    SLIDER = "Slider"


@dataclass(frozen=True)
class PropertyRequirement:
    """A property a component kind must carry.

    Attributes:
        name: Canonical property name, used in error paths and messages.
        legacy_names: Older spellings that also satisfy the requirement.
    """

    name: str
    legacy_names: tuple[str, ...] = ()

    @property
    def accepted_names(self) -> tuple[str, ...]:
        return (self.name, *self.legacy_names)

    def is_satisfied_by(self, properties: Mapping[str, Any]) -> bool:
        """Check presence (not truthiness) of the property or an alias."""
        return any(name in properties for name in self.accepted_names)


def _req(*names: str) -> tuple[PropertyRequirement, ...]:
    return tuple(PropertyRequirement(name) for name in names)


@dataclass(frozen=True)
class ComponentMeta:
    """Metadata definition for a standard component kind.

    Attributes:
        type: The component kind.
        category: Content, layout or interactive.
        description: One-line human description.
        required: Required properties under v0.9.
        legacy_required: Required properties under v0.8, when they differ.
        examples: Typical uses, for catalog exports.
    """

    type: ComponentType
    category: ComponentCategory
    description: str
    required: tuple[PropertyRequirement, ...] = ()
    legacy_required: tuple[PropertyRequirement, ...] | None = None
    examples: tuple[str, ...] = field(default_factory=tuple)

    def requirements(
        self, version: ProtocolVersion = DEFAULT_PROTOCOL_VERSION
    ) -> tuple[PropertyRequirement, ...]:
        """Required properties for a protocol version."""
        if version is ProtocolVersion.V0_8 and self.legacy_required is not None:
            return self.legacy_required
        return self.required

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary for catalog export."""
        return {
            "type": self.type.value,
            "category": self.category.value,
            "description": self.description,
            "required": [req.name for req in self.required],
            "legacy_required": [
                req.name for req in self.requirements(ProtocolVersion.V0_8)
            ],
            "examples": list(self.examples),
        }


COMPONENT_REGISTRY: dict[ComponentType, ComponentMeta] = {
    # === CONTENT ===
    ComponentType.TEXT: ComponentMeta(
        type=ComponentType.TEXT,
        category=ComponentCategory.CONTENT,
        description="Text block with simple Markdown and heading variants",
        required=_req("text"),
        examples=("Page title", "Form caption", "Bound user name"),
    ),
    ComponentType.IMAGE: ComponentMeta(
        type=ComponentType.IMAGE,
        category=ComponentCategory.CONTENT,
        description="Image loaded from a literal or bound URL",
        required=_req("url"),
        examples=("Avatar", "Product photo"),
    ),
    ComponentType.ICON: ComponentMeta(
        type=ComponentType.ICON,
        category=ComponentCategory.CONTENT,
        description="Named icon from the standard set or a custom SVG path",
        required=_req("name"),
        examples=("Checkmark", "Settings gear"),
    ),
    ComponentType.VIDEO: ComponentMeta(
        type=ComponentType.VIDEO,
        category=ComponentCategory.CONTENT,
        description="Video player for a literal or bound URL",
        required=_req("url"),
    ),
    ComponentType.AUDIO_PLAYER: ComponentMeta(
        type=ComponentType.AUDIO_PLAYER,
        category=ComponentCategory.CONTENT,
        description="Audio player with an optional description",
        required=_req("url"),
    ),
    # === LAYOUT ===
    ComponentType.ROW: ComponentMeta(
        type=ComponentType.ROW,
        category=ComponentCategory.LAYOUT,
        description="Horizontal container of child component references",
        required=_req("children"),
        examples=("Toolbar", "Button group"),
    ),
    ComponentType.COLUMN: ComponentMeta(
        type=ComponentType.COLUMN,
        category=ComponentCategory.LAYOUT,
        description="Vertical container of child component references",
        required=_req("children"),
        examples=("Page body", "Form"),
    ),
    ComponentType.LIST: ComponentMeta(
        type=ComponentType.LIST,
        category=ComponentCategory.LAYOUT,
        description="Scrollable list of static children or a data-bound template",
        required=_req("children"),
        examples=("Search results", "Chat history"),
    ),
    ComponentType.CARD: ComponentMeta(
        type=ComponentType.CARD,
        category=ComponentCategory.LAYOUT,
        description="Elevated container wrapping exactly one child",
        required=_req("child"),
    ),
    ComponentType.TABS: ComponentMeta(
        type=ComponentType.TABS,
        category=ComponentCategory.LAYOUT,
        description="Tabbed container, one child per titled tab",
        required=(PropertyRequirement("tabs", legacy_names=("tabItems",)),),
        legacy_required=_req("tabItems"),
    ),
    ComponentType.DIVIDER: ComponentMeta(
        type=ComponentType.DIVIDER,
        category=ComponentCategory.LAYOUT,
        description="Horizontal or vertical separator line",
    ),
    ComponentType.MODAL: ComponentMeta(
        type=ComponentType.MODAL,
        category=ComponentCategory.LAYOUT,
        description="Overlay opened by a trigger component",
        required=(
            PropertyRequirement("trigger", legacy_names=("entryPointChild",)),
            PropertyRequirement("content", legacy_names=("contentChild",)),
        ),
        legacy_required=_req("entryPointChild", "contentChild"),
        examples=("Confirmation dialog",),
    ),
    # === INTERACTIVE ===
    ComponentType.BUTTON: ComponentMeta(
        type=ComponentType.BUTTON,
        category=ComponentCategory.INTERACTIVE,
        description="Clickable child component that dispatches an action",
        required=_req("child", "action"),
        examples=("Submit", "Cancel"),
    ),
    ComponentType.CHECK_BOX: ComponentMeta(
        type=ComponentType.CHECK_BOX,
        category=ComponentCategory.INTERACTIVE,
        description="Labelled boolean toggle",
        required=_req("label", "value"),
    ),
    ComponentType.TEXT_FIELD: ComponentMeta(
        type=ComponentType.TEXT_FIELD,
        category=ComponentCategory.INTERACTIVE,
        description="Labelled single or multi-line text input",
        required=_req("label"),
    ),
    ComponentType.DATE_TIME_INPUT: ComponentMeta(
        type=ComponentType.DATE_TIME_INPUT,
        category=ComponentCategory.INTERACTIVE,
        description="Date and/or time picker",
        required=_req("value"),
    ),
    ComponentType.CHOICE_PICKER: ComponentMeta(
        type=ComponentType.CHOICE_PICKER,
        category=ComponentCategory.INTERACTIVE,
        description="Single or multiple selection from fixed options",
        required=_req("options", "value"),
    ),
    ComponentType.SLIDER: ComponentMeta(
        type=ComponentType.SLIDER,
        category=ComponentCategory.INTERACTIVE,
        description="Numeric range input between min and max",
        required=_req("value", "min", "max"),
        legacy_required=_req("value"),
    ),
}

_KINDS_BY_NAME: dict[str, ComponentType] = {ct.value: ct for ct in ComponentType}


# === LOOKUP FUNCTIONS ===


def resolve_component_type(kind: Any) -> ComponentType | None:
    """Resolve a kind name to ComponentType.

    Matching is exact and case-sensitive, as on the wire.

    Args:
        kind: Any value; non-strings resolve to None.

    Returns:
        ComponentType if the name is a standard kind, None otherwise.
    """
    if isinstance(kind, ComponentType):
        return kind
    if not isinstance(kind, str):
        return None
    return _KINDS_BY_NAME.get(kind)


def is_standard_kind(kind: Any) -> bool:
    """Check if a kind name belongs to the standard catalog."""
    return resolve_component_type(kind) is not None


def get_component_meta(component_type: ComponentType) -> ComponentMeta:
    """Get full metadata for a component kind.

    Args:
        component_type: The component kind to look up.

    Returns:
        ComponentMeta with all metadata.

    Raises:
        KeyError: If component_type is not registered.
    """
    return COMPONENT_REGISTRY[component_type]


def get_requirements(
    kind: Any, version: ProtocolVersion = DEFAULT_PROTOCOL_VERSION
) -> tuple[PropertyRequirement, ...]:
    """Required properties of a kind; unknown kinds require nothing."""
    component_type = resolve_component_type(kind)
    if component_type is None:
        return ()
    return COMPONENT_REGISTRY[component_type].requirements(version)


def required_fields_for(
    kind: Any, version: ProtocolVersion = DEFAULT_PROTOCOL_VERSION
) -> list[str]:
    """Canonical required field names for a kind.

    Example:
        >>> required_fields_for("Slider")
        ['value', 'min', 'max']
        >>> required_fields_for("Tabs", ProtocolVersion.V0_8)
        ['tabItems']
    """
    return [req.name for req in get_requirements(kind, version)]


def get_components_by_category(category: ComponentCategory) -> list[ComponentType]:
    """Get all component kinds in a category."""
    return [ct for ct, meta in COMPONENT_REGISTRY.items() if meta.category == category]


def export_catalog_summary() -> dict[str, Any]:
    """Export the registry as a JSON-friendly catalog summary.

    Returns:
        Dict with per-kind metadata and the kind lists per category.
    """
    return {
        "components": {
            ct.value: COMPONENT_REGISTRY[ct].to_dict() for ct in ComponentType
        },
        "categories": {
            cat.value: [ct.value for ct in get_components_by_category(cat)]
            for cat in ComponentCategory
        },
        "protocol_versions": [v.value for v in ProtocolVersion],
    }


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
    "export_catalog_summary",
]
