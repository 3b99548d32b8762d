"""Builders for standard A2UI v0.9 components.

Every builder validates its arguments through the matching model in
`a2ui.components` and returns the camelCase wire dict with unset fields
dropped. Builders always emit canonical v0.9 field names (``tabs``,
``trigger``/``content``) and the ``{"event": ...}`` action shape, so their
output passes `a2ui.validation.validate_components` in strict mode.

IDs come from the explicit ``id`` argument, else from the caller's
`IdGenerator` passed as ``ids``, else a random uuid-based ID.

Example usage:
    >>> from a2ui.builders import IdGenerator, column, event_action, h1, text_button
    >>> ids = IdGenerator()
    >>> title = h1("Welcome", ids=ids)
    >>> label, button = text_button("Start", event_action("start"), ids=ids)
    >>> root = column([title["id"], button["id"]], id="root")
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from a2ui.builders.ids import IdGenerator, resolve_id
from a2ui.components import (
    AudioPlayerComponent,
    ButtonComponent,
    CardComponent,
    CheckBoxComponent,
    ChoicePickerComponent,
    ColumnComponent,
    DateTimeInputComponent,
    DividerComponent,
    EventAction,
    FunctionCallAction,
    IconComponent,
    ImageComponent,
    ListComponent,
    ModalComponent,
    RowComponent,
    SliderComponent,
    TabsComponent,
    TextComponent,
    TextFieldComponent,
    TextVariant,
    VideoComponent,
    dump_component,
)

logger = logging.getLogger(__name__)


def _build(
    model: type[BaseModel],
    prefix: str,
    id: str | None,
    ids: IdGenerator | None,
    **fields: Any,
) -> dict[str, Any]:
    component = model(id=resolve_id(prefix, id, ids), **fields)
    logger.debug(f"Built {component.component} component '{component.id}'")
    return dump_component(component)


def _dump_action(action: BaseModel | Mapping[str, Any]) -> Any:
    if isinstance(action, BaseModel):
        return action.model_dump(mode="json", by_alias=True, exclude_none=True)
    return action


# =============================================================================
# Actions
# =============================================================================


def event_action(name: str, context: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Server event action: ``{"event": {"name": ..., "context": ...}}``."""
    action = EventAction(event={"name": name, "context": context})
    return _dump_action(action)


def function_call_action(
    call: str, args: Sequence[Any] | None = None, return_type: str | None = None
) -> dict[str, Any]:
    """Client-side function call action: ``{"functionCall": {"call": ...}}``."""
    action = FunctionCallAction(
        functionCall={
            "call": call,
            "args": list(args) if args is not None else None,
            "returnType": return_type,
        }
    )
    return _dump_action(action)


# =============================================================================
# Content
# =============================================================================


def text(
    value: Any,
    *,
    variant: TextVariant | str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Text component. ``value`` is a literal, a binding or a function call."""
    return _build(TextComponent, "text", id, ids, text=value, variant=variant, **props)


def h1(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.H1, **kwargs)


def h2(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.H2, **kwargs)


def h3(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.H3, **kwargs)


def h4(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.H4, **kwargs)


def h5(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.H5, **kwargs)


def caption(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.CAPTION, **kwargs)


def body(value: Any, **kwargs: Any) -> dict[str, Any]:
    return text(value, variant=TextVariant.BODY, **kwargs)


def image(
    url: Any,
    *,
    fit: str | None = None,
    variant: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        ImageComponent, "image", id, ids, url=url, fit=fit, variant=variant, **props
    )


def icon(
    name: Any,
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(IconComponent, "icon", id, ids, name=name, **props)


def video(
    url: Any,
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(VideoComponent, "video", id, ids, url=url, **props)


def audio_player(
    url: Any,
    *,
    description: Any = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        AudioPlayerComponent,
        "audio",
        id,
        ids,
        url=url,
        description=description,
        **props,
    )


# =============================================================================
# Layout
# =============================================================================


def _children(children: Sequence[str] | Mapping[str, Any]) -> Any:
    # A mapping is a data-bound template: {"componentId": ..., "path": ...}
    if isinstance(children, Mapping):
        return dict(children)
    return list(children)


def row(
    children: Sequence[str] | Mapping[str, Any],
    *,
    justify: str | None = None,
    align: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Horizontal container. ``children`` is a list of IDs or a template."""
    return _build(
        RowComponent,
        "row",
        id,
        ids,
        children=_children(children),
        justify=justify,
        align=align,
        **props,
    )


def column(
    children: Sequence[str] | Mapping[str, Any],
    *,
    justify: str | None = None,
    align: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Vertical container. ``children`` is a list of IDs or a template."""
    return _build(
        ColumnComponent,
        "column",
        id,
        ids,
        children=_children(children),
        justify=justify,
        align=align,
        **props,
    )


def list_(
    children: Sequence[str] | Mapping[str, Any],
    *,
    direction: str | None = None,
    align: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Scrollable list. Named with a trailing underscore to spare the builtin."""
    return _build(
        ListComponent,
        "list",
        id,
        ids,
        children=_children(children),
        direction=direction,
        align=align,
        **props,
    )


def card(
    child: str,
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(CardComponent, "card", id, ids, child=child, **props)


def tabs(
    items: Sequence[tuple[Any, str] | Mapping[str, Any]],
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Tabs component.

    Args:
        items: ``(title, child_id)`` pairs or ``{"title", "child"}`` maps.
        id: Explicit component ID.
        ids: Generator used when ``id`` is omitted.

    Returns:
        Wire dict using the canonical ``tabs`` field.
    """
    tab_items = [
        dict(item) if isinstance(item, Mapping) else {"title": item[0], "child": item[1]}
        for item in items
    ]
    return _build(TabsComponent, "tabs", id, ids, tabs=tab_items, **props)


def divider(
    *,
    axis: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(DividerComponent, "divider", id, ids, axis=axis, **props)


def modal(
    trigger: str,
    content: str,
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Modal opened by the ``trigger`` component, showing ``content``."""
    return _build(
        ModalComponent, "modal", id, ids, trigger=trigger, content=content, **props
    )


# =============================================================================
# Interactive
# =============================================================================


def button(
    child: str,
    action: BaseModel | Mapping[str, Any],
    *,
    variant: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Button whose label is the component ``child``.

    Raises:
        pydantic.ValidationError: If ``action`` is not a v0.9 event or
            function call action (e.g. a bare ``{"name": ...}`` map).
    """
    return _build(
        ButtonComponent,
        "button",
        id,
        ids,
        child=child,
        action=_dump_action(action),
        variant=variant,
        **props,
    )


def text_button(
    label: Any,
    action: BaseModel | Mapping[str, Any],
    *,
    variant: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Button with a Text label. Returns ``(label, button)``; add both."""
    button_id = resolve_id("button", id, ids)
    label_component = text(label, id=f"{button_id}_label")
    button_component = button(
        label_component["id"], action, variant=variant, id=button_id, **props
    )
    return label_component, button_component


def checkbox(
    label: Any,
    value: Any,
    *,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        CheckBoxComponent, "checkbox", id, ids, label=label, value=value, **props
    )


def text_field(
    label: Any,
    value: Any = None,
    *,
    variant: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        TextFieldComponent,
        "textfield",
        id,
        ids,
        label=label,
        value=value,
        variant=variant,
        **props,
    )


def date_time_input(
    value: Any,
    *,
    enable_date: bool | None = None,
    enable_time: bool | None = None,
    label: Any = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        DateTimeInputComponent,
        "datetime",
        id,
        ids,
        value=value,
        enable_date=enable_date,
        enable_time=enable_time,
        label=label,
        **props,
    )


def choice_picker(
    options: Sequence[tuple[Any, str] | Mapping[str, Any]],
    value: Any,
    *,
    label: Any = None,
    variant: str | None = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Choice picker. ``options`` are ``(label, value)`` pairs or maps."""
    choices = [
        dict(option)
        if isinstance(option, Mapping)
        else {"label": option[0], "value": option[1]}
        for option in options
    ]
    return _build(
        ChoicePickerComponent,
        "choice",
        id,
        ids,
        options=choices,
        value=value,
        label=label,
        variant=variant,
        **props,
    )


def slider(
    value: Any,
    *,
    min: int | float = 0,
    max: int | float = 100,
    label: Any = None,
    id: str | None = None,
    ids: IdGenerator | None = None,
    **props: Any,
) -> dict[str, Any]:
    return _build(
        SliderComponent,
        "slider",
        id,
        ids,
        value=value,
        min=min,
        max=max,
        label=label,
        **props,
    )


__all__ = [
    # Actions
    "event_action",
    "function_call_action",
    # Content
    "text",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "caption",
    "body",
    "image",
    "icon",
    "video",
    "audio_player",
    # Layout
    "row",
    "column",
    "list_",
    "card",
    "tabs",
    "divider",
    "modal",
    # Interactive
    "button",
    "text_button",
    "checkbox",
    "text_field",
    "date_time_input",
    "choice_picker",
    "slider",
]
