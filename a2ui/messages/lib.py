"""A2UI message envelopes, kind detection and JSONL framing.

Every message is a JSON object with exactly one top-level key naming its kind.
The key also tells the protocol version when none is given:

    createSurface, updateComponents, updateDataModel  -> v0.9
    beginRendering, surfaceUpdate, dataModelUpdate    -> v0.8
    deleteSurface                                     -> v0.9 (same shape in v0.8)

Streams are framed as JSON Lines, one message per line.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from a2ui.schema import ProtocolVersion

logger = logging.getLogger(__name__)

STANDARD_CATALOG_ID = (
    "https://a2ui.dev/specification/0.9/standard_catalog_definition.json"
)
A2UI_EXTENSION_URI = "https://a2ui.dev/specification/0.9"
A2UI_EXTENSION_URI_V08 = "https://a2ui.org/a2a-extension/a2ui/v0.8"
A2UI_MIME_TYPE = "application/json+a2ui"


class MessageKind(str, Enum):
    """Top-level keys that identify a server-to-client message."""

    CREATE_SURFACE = "createSurface"
    UPDATE_COMPONENTS = "updateComponents"
    UPDATE_DATA_MODEL = "updateDataModel"
    DELETE_SURFACE = "deleteSurface"
    # v0.8
    BEGIN_RENDERING = "beginRendering"
    SURFACE_UPDATE = "surfaceUpdate"
    DATA_MODEL_UPDATE = "dataModelUpdate"


V09_MESSAGE_KINDS: tuple[MessageKind, ...] = (
    MessageKind.CREATE_SURFACE,
    MessageKind.UPDATE_COMPONENTS,
    MessageKind.UPDATE_DATA_MODEL,
    MessageKind.DELETE_SURFACE,
)
V08_MESSAGE_KINDS: tuple[MessageKind, ...] = (
    MessageKind.BEGIN_RENDERING,
    MessageKind.SURFACE_UPDATE,
    MessageKind.DATA_MODEL_UPDATE,
    MessageKind.DELETE_SURFACE,
)

MESSAGE_KINDS_BY_VERSION: dict[ProtocolVersion, tuple[MessageKind, ...]] = {
    ProtocolVersion.V0_9: V09_MESSAGE_KINDS,
    ProtocolVersion.V0_8: V08_MESSAGE_KINDS,
}

_KIND_VERSION: dict[MessageKind, ProtocolVersion] = {
    MessageKind.CREATE_SURFACE: ProtocolVersion.V0_9,
    MessageKind.UPDATE_COMPONENTS: ProtocolVersion.V0_9,
    MessageKind.UPDATE_DATA_MODEL: ProtocolVersion.V0_9,
    MessageKind.DELETE_SURFACE: ProtocolVersion.V0_9,
    MessageKind.BEGIN_RENDERING: ProtocolVersion.V0_8,
    MessageKind.SURFACE_UPDATE: ProtocolVersion.V0_8,
    MessageKind.DATA_MODEL_UPDATE: ProtocolVersion.V0_8,
}


def recognized_kinds(
    message: Any, version: ProtocolVersion | None = None
) -> list[MessageKind]:
    """List the recognized kind keys present on a message.

    Args:
        message: Any JSON-shaped value; non-mappings have no kinds.
        version: Restrict recognition to one protocol version's keys.

    Returns:
        Kinds in declaration order. A well-formed message yields exactly one.
    """
    if not isinstance(message, Mapping):
        return []
    candidates = MESSAGE_KINDS_BY_VERSION[version] if version else tuple(MessageKind)
    return [kind for kind in candidates if kind.value in message]


def detect_version(message: Any) -> ProtocolVersion | None:
    """Infer the protocol version from a message's single kind key.

    Returns:
        The version, or None when the message has zero or several kind keys.
    """
    kinds = recognized_kinds(message)
    if len(kinds) != 1:
        return None
    return _KIND_VERSION[kinds[0]]


# =============================================================================
# Server-to-client models (v0.9)
# =============================================================================


class Theme(BaseModel):
    """Surface styling hints. Unknown keys pass through."""

    primary_color: str | None = Field(
        default=None,
        alias="primaryColor",
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Accent color as #RRGGBB",
    )
    font: str | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class _Body(BaseModel):
    surface_id: str = Field(..., alias="surfaceId", min_length=1)

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CreateSurface(_Body):
    catalog_id: str = Field(
        default=STANDARD_CATALOG_ID, alias="catalogId", min_length=1
    )
    theme: Theme | None = None
    send_data_model: bool | None = Field(default=None, alias="sendDataModel")


class UpdateComponents(_Body):
    components: list[dict[str, Any]] = Field(
        ..., description="Flat component list; children refer to IDs"
    )


class UpdateDataModel(_Body):
    path: str | None = Field(default=None, description="Target path; root if None")
    op: Literal["add", "replace", "remove"] | None = None
    value: Any = None


class DeleteSurface(_Body):
    pass


class CreateSurfaceMessage(BaseModel):
    create_surface: CreateSurface = Field(..., alias="createSurface")

    model_config = ConfigDict(populate_by_name=True)


class UpdateComponentsMessage(BaseModel):
    update_components: UpdateComponents = Field(..., alias="updateComponents")

    model_config = ConfigDict(populate_by_name=True)


class UpdateDataModelMessage(BaseModel):
    update_data_model: UpdateDataModel = Field(..., alias="updateDataModel")

    model_config = ConfigDict(populate_by_name=True)


class DeleteSurfaceMessage(BaseModel):
    delete_surface: DeleteSurface = Field(..., alias="deleteSurface")

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Server-to-client models (v0.8)
# =============================================================================


class ValueMap(BaseModel):
    """v0.8 typed data-model entry. Exactly one ``value*`` field is set."""

    key: str
    value_string: str | None = Field(default=None, alias="valueString")
    value_number: int | float | None = Field(default=None, alias="valueNumber")
    value_boolean: bool | None = Field(default=None, alias="valueBoolean")
    value_map: list["ValueMap"] | None = Field(default=None, alias="valueMap")

    model_config = ConfigDict(populate_by_name=True)


class BeginRendering(_Body):
    root: str = Field(..., min_length=1, description="ID of the root component")
    styles: Theme | None = None


class SurfaceUpdate(_Body):
    components: list[dict[str, Any]]


class DataModelUpdate(_Body):
    path: str | None = None
    contents: list[ValueMap]


# =============================================================================
# Client-to-server models
# =============================================================================


class UserAction(BaseModel):
    """Reported when the user triggers a component action."""

    name: str
    surface_id: str = Field(..., alias="surfaceId")
    source_component_id: str = Field(..., alias="sourceComponentId")
    timestamp: str = Field(..., description="ISO 8601 date-time")
    context: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True)


class DataChange(BaseModel):
    """Reported when an input component writes to the data model."""

    surface_id: str = Field(..., alias="surfaceId")
    path: str
    value: Any = None
    source_component_id: str = Field(..., alias="sourceComponentId")

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# JSONL framing
# =============================================================================


def _to_json_ready(message: Any) -> Any:
    if isinstance(message, BaseModel):
        return message.model_dump(mode="json", by_alias=True, exclude_none=True)
    return message


def messages_to_jsonl(messages: Iterable[Any]) -> str:
    """Serialize messages as JSON Lines (compact, newline terminated)."""
    lines = [
        json.dumps(_to_json_ready(message), separators=(",", ":"), ensure_ascii=False)
        for message in messages
    ]
    return "".join(f"{line}\n" for line in lines)


def jsonl_to_messages(text: str) -> list[Any]:
    """Parse JSON Lines into messages. Blank lines are skipped.

    Raises:
        ValueError: On the first line that is not valid JSON, naming the line.
    """
    messages: list[Any] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            messages.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {line_number}: {e.msg}") from e
    logger.debug(f"Parsed {len(messages)} messages from JSONL")
    return messages


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
