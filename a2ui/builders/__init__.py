"""Builders for components, messages and v0.8 data-model entries.

Example usage:
    >>> from a2ui.builders import IdGenerator, create_messages, h1, column
    >>> ids = IdGenerator()
    >>> title = h1("Hello", ids=ids)
    >>> root = column([title["id"]], id="root")
    >>> messages = create_messages("s1", [root, title])
    >>> [next(iter(m)) for m in messages]
    ['createSurface', 'updateComponents']
"""

from .data_model import (
    deep_merge,
    flatten_object_to_value_map,
    normalize_path,
    object_to_value_map,
    updates_to_value_map,
    value_map_to_object,
    value_to_value_map,
)
from .ids import IdGenerator, random_id, resolve_id
from .lib import (
    audio_player,
    body,
    button,
    caption,
    card,
    checkbox,
    choice_picker,
    column,
    date_time_input,
    divider,
    event_action,
    function_call_action,
    h1,
    h2,
    h3,
    h4,
    h5,
    icon,
    image,
    list_,
    modal,
    row,
    slider,
    tabs,
    text,
    text_button,
    text_field,
    video,
)
from .messages import (
    create_messages,
    create_surface,
    delete_surface,
    update_components,
    update_data_model,
)

__all__ = [
    # IDs
    "IdGenerator",
    "random_id",
    "resolve_id",
    # Actions
    "event_action",
    "function_call_action",
    # Components
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
    "row",
    "column",
    "list_",
    "card",
    "tabs",
    "divider",
    "modal",
    "button",
    "text_button",
    "checkbox",
    "text_field",
    "date_time_input",
    "choice_picker",
    "slider",
    # Messages
    "create_surface",
    "update_components",
    "update_data_model",
    "delete_surface",
    "create_messages",
    # Data model (v0.8)
    "value_to_value_map",
    "object_to_value_map",
    "flatten_object_to_value_map",
    "value_map_to_object",
    "normalize_path",
    "updates_to_value_map",
    "deep_merge",
]
