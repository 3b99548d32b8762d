"""Typed component and action models for the A2UI standard catalog.

Example usage:
    >>> from a2ui.components import parse_component, classify_action
    >>> card = parse_component({"id": "c", "component": "Card", "child": "t"})
    >>> classify_action({"event": {"name": "go"}}).value
    'event'
"""

from .lib import (
    ACTION_SHAPES_BY_VERSION,
    Action,
    ActionEvent,
    ActionShape,
    Align,
    AudioPlayerComponent,
    Axis,
    ButtonComponent,
    ButtonVariant,
    CardComponent,
    CheckBoxComponent,
    ChildList,
    ChildTemplate,
    ChoiceOption,
    ChoicePickerComponent,
    ChoicePickerVariant,
    ColumnComponent,
    ComponentBase,
    DateTimeInputComponent,
    DividerComponent,
    EventAction,
    FunctionCallAction,
    IconComponent,
    ImageComponent,
    ImageFit,
    ImageVariant,
    Justify,
    LegacyAction,
    ListComponent,
    ModalComponent,
    RowComponent,
    SliderComponent,
    StandardComponent,
    TabItem,
    TabsComponent,
    TextComponent,
    TextFieldComponent,
    TextFieldVariant,
    TextVariant,
    VideoComponent,
    classify_action,
    dump_component,
    is_action_valid_for,
    parse_component,
)

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
    # Parsing
    "parse_component",
    "dump_component",
]
