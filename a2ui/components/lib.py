"""Typed models for the 18 standard A2UI components and their actions.

Components arrive as open JSON maps. The validator checks them structurally
first; these models are for narrowing already-checked input and for building
well-formed instances. Every component model tolerates extra keys, but a
binding inside one must be a bare `DataBinding` with ``path`` alone.

The ``component`` field is the discriminator of the `StandardComponent` union.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

from a2ui.primitives import DataBinding, FunctionCall
from a2ui.schema import DEFAULT_PROTOCOL_VERSION, ProtocolVersion

logger = logging.getLogger(__name__)

DynamicString = Union[str, DataBinding, FunctionCall]
DynamicNumber = Union[int, float, DataBinding, FunctionCall]
DynamicBoolean = Union[bool, DataBinding, dict[str, Any]]
DynamicStringList = Union[list[str], DataBinding, FunctionCall]


# =============================================================================
# Enums
# =============================================================================


class TextVariant(str, Enum):
    """Typographic role of a Text component."""

    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    CAPTION = "caption"
    BODY = "body"


class ImageFit(str, Enum):
    CONTAIN = "contain"
    COVER = "cover"
    FILL = "fill"
    NONE = "none"
    SCALE_DOWN = "scale-down"


class ImageVariant(str, Enum):
    ICON = "icon"
    AVATAR = "avatar"
    SMALL_FEATURE = "smallFeature"
    MEDIUM_FEATURE = "mediumFeature"
    LARGE_FEATURE = "largeFeature"
    HEADER = "header"


class Justify(str, Enum):
    """Main-axis distribution for Row and Column."""

    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "spaceBetween"
    SPACE_AROUND = "spaceAround"
    SPACE_EVENLY = "spaceEvenly"
    STRETCH = "stretch"


class Align(str, Enum):
    """Cross-axis alignment for Row, Column and List."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class Axis(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    BORDERLESS = "borderless"


class TextFieldVariant(str, Enum):
    LONG_TEXT = "longText"
    NUMBER = "number"
    SHORT_TEXT = "shortText"
    OBSCURED = "obscured"


class ChoicePickerVariant(str, Enum):
    MULTIPLE_SELECTION = "multipleSelection"
    MUTUALLY_EXCLUSIVE = "mutuallyExclusive"


# =============================================================================
# Actions
# =============================================================================


class ActionShape(str, Enum):
    """Wire shapes an ``action`` value can take.

    - EVENT: ``{"event": {"name": ..., "context": ...}}`` (v0.9)
    - FUNCTION_CALL: ``{"functionCall": {"call": ...}}`` (v0.9)
    - LEGACY: ``{"name": ..., "context": ...}`` (v0.8)
    - UNKNOWN: anything else
    """

    EVENT = "event"
    FUNCTION_CALL = "functionCall"
    LEGACY = "legacy"
    UNKNOWN = "unknown"


ACTION_SHAPES_BY_VERSION: dict[ProtocolVersion, frozenset[ActionShape]] = {
    ProtocolVersion.V0_9: frozenset({ActionShape.EVENT, ActionShape.FUNCTION_CALL}),
    ProtocolVersion.V0_8: frozenset({ActionShape.LEGACY}),
}


class ActionEvent(BaseModel):
    """Named event dispatched to the server, with an optional context."""

    name: str = Field(..., description="Event name the server handles")
    context: dict[str, Any] | None = Field(
        default=None,
        description="Values (literals or bindings) resolved at dispatch time",
    )


class EventAction(BaseModel):
    """v0.9 server event action."""

    event: ActionEvent

    model_config = ConfigDict(extra="forbid")


class FunctionCallAction(BaseModel):
    """v0.9 client-side function call action."""

    function_call: FunctionCall = Field(..., alias="functionCall")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class LegacyAction(BaseModel):
    """v0.8 bare action: ``{name, context}`` without the ``event`` wrapper."""

    name: str
    context: Any = None

    model_config = ConfigDict(extra="forbid")


Action = Union[EventAction, FunctionCallAction]


def classify_action(value: Any) -> ActionShape:
    """Name the wire shape of an action value.

    Only the discriminating key is inspected; the contents are not checked.

    Example:
        >>> classify_action({"event": {"name": "submit"}})
        <ActionShape.EVENT: 'event'>
        >>> classify_action({"name": "submit"})
        <ActionShape.LEGACY: 'legacy'>
    """
    if not isinstance(value, Mapping):
        return ActionShape.UNKNOWN
    if isinstance(value.get("event"), Mapping):
        return ActionShape.EVENT
    if isinstance(value.get("functionCall"), Mapping):
        return ActionShape.FUNCTION_CALL
    if isinstance(value.get("name"), str):
        return ActionShape.LEGACY
    return ActionShape.UNKNOWN


def is_action_valid_for(
    value: Any, version: ProtocolVersion = DEFAULT_PROTOCOL_VERSION
) -> bool:
    """Check that an action uses a shape the protocol version accepts."""
    return classify_action(value) in ACTION_SHAPES_BY_VERSION[version]


# =============================================================================
# Shared Structures
# =============================================================================


class ChildTemplate(BaseModel):
    """Data-bound child list: one template component per item at ``path``."""

    component_id: str = Field(..., alias="componentId")
    path: str

    model_config = ConfigDict(populate_by_name=True)


ChildList = Union[list[str], ChildTemplate]


class TabItem(BaseModel):
    title: DynamicString
    child: str = Field(..., description="ID of the tab's content component")


class ChoiceOption(BaseModel):
    label: DynamicString
    value: str


# =============================================================================
# Components
# =============================================================================


class ComponentBase(BaseModel):
    """Fields shared by every component instance."""

    id: str = Field(..., description="Unique ID within the surface")
    accessibility: dict[str, Any] | None = None
    weight: float | None = Field(
        default=None, description="Flex weight inside a Row or Column"
    )

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, use_enum_values=True
    )


class CheckableBase(ComponentBase):
    """Interactive components may carry validation checks."""

    checks: list[dict[str, Any]] | None = None


class TextComponent(ComponentBase):
    component: Literal["Text"] = "Text"
    text: DynamicString
    variant: TextVariant | None = None


class ImageComponent(ComponentBase):
    component: Literal["Image"] = "Image"
    url: DynamicString
    fit: ImageFit | None = None
    variant: ImageVariant | None = None


class IconComponent(ComponentBase):
    component: Literal["Icon"] = "Icon"
    name: str | DataBinding = Field(
        ..., description="Standard icon name, or {path} for a custom SVG path"
    )


class VideoComponent(ComponentBase):
    component: Literal["Video"] = "Video"
    url: DynamicString


class AudioPlayerComponent(ComponentBase):
    component: Literal["AudioPlayer"] = "AudioPlayer"
    url: DynamicString
    description: DynamicString | None = None


class RowComponent(ComponentBase):
    component: Literal["Row"] = "Row"
    children: ChildList
    justify: Justify | None = None
    align: Align | None = None


class ColumnComponent(ComponentBase):
    component: Literal["Column"] = "Column"
    children: ChildList
    justify: Justify | None = None
    align: Align | None = None


class ListComponent(ComponentBase):
    component: Literal["List"] = "List"
    children: ChildList
    direction: Axis | None = None
    align: Align | None = None


class CardComponent(ComponentBase):
    component: Literal["Card"] = "Card"
    child: str


class TabsComponent(ComponentBase):
    component: Literal["Tabs"] = "Tabs"
    tabs: list[TabItem] = Field(
        ..., validation_alias=AliasChoices("tabs", "tabItems")
    )


class DividerComponent(ComponentBase):
    component: Literal["Divider"] = "Divider"
    axis: Axis | None = None


class ModalComponent(ComponentBase):
    component: Literal["Modal"] = "Modal"
    trigger: str = Field(
        ..., validation_alias=AliasChoices("trigger", "entryPointChild")
    )
    content: str = Field(
        ..., validation_alias=AliasChoices("content", "contentChild")
    )


class ButtonComponent(CheckableBase):
    component: Literal["Button"] = "Button"
    child: str = Field(..., description="ID of the label component")
    action: Action
    variant: ButtonVariant | None = None


class CheckBoxComponent(CheckableBase):
    component: Literal["CheckBox"] = "CheckBox"
    label: DynamicString
    value: DynamicBoolean


class TextFieldComponent(CheckableBase):
    component: Literal["TextField"] = "TextField"
    label: DynamicString
    value: DynamicString | None = None
    variant: TextFieldVariant | None = None


class DateTimeInputComponent(CheckableBase):
    component: Literal["DateTimeInput"] = "DateTimeInput"
    value: DynamicString
    enable_date: bool | None = Field(default=None, alias="enableDate")
    enable_time: bool | None = Field(default=None, alias="enableTime")
    min: DynamicString | None = None
    max: DynamicString | None = None
    label: DynamicString | None = None


class ChoicePickerComponent(CheckableBase):
    component: Literal["ChoicePicker"] = "ChoicePicker"
    options: list[ChoiceOption]
    value: DynamicStringList
    label: DynamicString | None = None
    variant: ChoicePickerVariant | None = None


class SliderComponent(CheckableBase):
    component: Literal["Slider"] = "Slider"
    value: DynamicNumber
    min: int | float
    max: int | float
    label: DynamicString | None = None


StandardComponent = Annotated[
    Union[
        TextComponent,
        ImageComponent,
        IconComponent,
        VideoComponent,
        AudioPlayerComponent,
        RowComponent,
        ColumnComponent,
        ListComponent,
        CardComponent,
        TabsComponent,
        DividerComponent,
        ModalComponent,
        ButtonComponent,
        CheckBoxComponent,
        TextFieldComponent,
        DateTimeInputComponent,
        ChoicePickerComponent,
        SliderComponent,
    ],
    Field(discriminator="component"),
]

_STANDARD_COMPONENT_ADAPTER: TypeAdapter[StandardComponent] = TypeAdapter(
    StandardComponent
)


def parse_component(data: Mapping[str, Any]) -> ComponentBase:
    """Narrow a raw component map into its typed model.

    Legacy field names (``tabItems``, ``entryPointChild``, ``contentChild``)
    are accepted and mapped onto the canonical fields.

    Args:
        data: Component map with a standard ``component`` kind.

    Returns:
        The matching component model.

    Raises:
        pydantic.ValidationError: If the kind is unknown or fields are ill-typed.
    """
    component = _STANDARD_COMPONENT_ADAPTER.validate_python(dict(data))
    logger.debug(f"Parsed {component.component} component '{component.id}'")
    return component


def dump_component(component: BaseModel) -> dict[str, Any]:
    """Serialize a component model to its camelCase wire form without Nones."""
    return component.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    # Enums
    "TextVariant",
    "ImageFit",
    "ImageVariant",
    "Justify",
    "Align",
    "Axis",
    "ButtonVariant",
    "TextFieldVariant",
    "ChoicePickerVariant",
    # Actions
    "ActionShape",
    "ACTION_SHAPES_BY_VERSION",
    "ActionEvent",
    "EventAction",
    "FunctionCallAction",
    "LegacyAction",
    "Action",
    "classify_action",
    "is_action_valid_for",
    # Structures
    "ChildTemplate",
    "ChildList",
    "TabItem",
    "ChoiceOption",
    # Components
    "ComponentBase",
    "TextComponent",
    "ImageComponent",
    "IconComponent",
    "VideoComponent",
    "AudioPlayerComponent",
    "RowComponent",
    "ColumnComponent",
    "ListComponent",
    "CardComponent",
    "TabsComponent",
    "DividerComponent",
    "ModalComponent",
    "ButtonComponent",
    "CheckBoxComponent",
    "TextFieldComponent",
    "DateTimeInputComponent",
    "ChoicePickerComponent",
    "SliderComponent",
    "StandardComponent",
    "parse_component",
    "dump_component",
]
