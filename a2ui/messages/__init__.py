"""Message envelopes, kind detection and JSONL framing."""

from .lib import (
    A2UI_EXTENSION_URI,
    A2UI_EXTENSION_URI_V08,
    A2UI_MIME_TYPE,
    MESSAGE_KINDS_BY_VERSION,
    STANDARD_CATALOG_ID,
    V08_MESSAGE_KINDS,
    V09_MESSAGE_KINDS,
    BeginRendering,
    CreateSurface,
    CreateSurfaceMessage,
    DataChange,
    DataModelUpdate,
    DeleteSurface,
    DeleteSurfaceMessage,
    MessageKind,
    SurfaceUpdate,
    Theme,
    UpdateComponents,
    UpdateComponentsMessage,
    UpdateDataModel,
    UpdateDataModelMessage,
    UserAction,
    ValueMap,
    detect_version,
    jsonl_to_messages,
    messages_to_jsonl,
    recognized_kinds,
)

__all__ = [
    # Constants
    "STANDARD_CATALOG_ID",
    "A2UI_EXTENSION_URI",
    "A2UI_EXTENSION_URI_V08",
    "A2UI_MIME_TYPE",
    # Kinds
    "MessageKind",
    "V09_MESSAGE_KINDS",
    "V08_MESSAGE_KINDS",
    "MESSAGE_KINDS_BY_VERSION",
    "recognized_kinds",
    "detect_version",
    # v0.9 models
    "Theme",
    "CreateSurface",
    "UpdateComponents",
    "UpdateDataModel",
    "DeleteSurface",
    "CreateSurfaceMessage",
    "UpdateComponentsMessage",
    "UpdateDataModelMessage",
    "DeleteSurfaceMessage",
    # v0.8 models
    "ValueMap",
    "BeginRendering",
    "SurfaceUpdate",
    "DataModelUpdate",
    # Client models
    "UserAction",
    "DataChange",
    # JSONL
    "messages_to_jsonl",
    "jsonl_to_messages",
]
