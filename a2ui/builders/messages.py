"""Builders for v0.9 server-to-client messages."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from a2ui.messages import (
    STANDARD_CATALOG_ID,
    CreateSurfaceMessage,
    DeleteSurfaceMessage,
    Theme,
    UpdateComponentsMessage,
    UpdateDataModelMessage,
)

logger = logging.getLogger(__name__)

# Distinguishes "no value" from an explicit JSON null
_UNSET: Any = object()


def _dump(message: Any) -> dict[str, Any]:
    return message.model_dump(mode="json", by_alias=True, exclude_none=True)


def create_surface(
    surface_id: str,
    *,
    catalog_id: str = STANDARD_CATALOG_ID,
    theme: Theme | Mapping[str, Any] | None = None,
    send_data_model: bool | None = None,
) -> dict[str, Any]:
    """Build a ``createSurface`` message.

    Raises:
        pydantic.ValidationError: If the surface ID is empty or the theme's
            primary color is not ``#RRGGBB``.
    """
    message = CreateSurfaceMessage(
        createSurface={
            "surfaceId": surface_id,
            "catalogId": catalog_id,
            "theme": theme,
            "sendDataModel": send_data_model,
        }
    )
    return _dump(message)


def update_components(
    surface_id: str, components: Sequence[Mapping[str, Any]]
) -> dict[str, Any]:
    """Build an ``updateComponents`` message from component wire dicts."""
    message = UpdateComponentsMessage(
        updateComponents={
            "surfaceId": surface_id,
            "components": [dict(c) for c in components],
        }
    )
    return _dump(message)


def update_data_model(
    surface_id: str,
    value: Any = _UNSET,
    *,
    path: str | None = None,
    op: str | None = None,
) -> dict[str, Any]:
    """Build an ``updateDataModel`` message.

    Args:
        surface_id: Target surface.
        value: New value. Omit it for ``op="remove"``; ``None`` is sent as
            JSON null.
        path: Data model path; the root when omitted.
        op: One of "add", "replace" or "remove".

    Returns:
        The message dict.
    """
    message = UpdateDataModelMessage(
        updateDataModel={"surfaceId": surface_id, "path": path, "op": op}
    )
    result = _dump(message)
    if value is not _UNSET:
        result["updateDataModel"]["value"] = value
    return result


def delete_surface(surface_id: str) -> dict[str, Any]:
    message = DeleteSurfaceMessage(deleteSurface={"surfaceId": surface_id})
    return _dump(message)


def create_messages(
    surface_id: str,
    components: Sequence[Mapping[str, Any]],
    *,
    data_model: Any = None,
    catalog_id: str = STANDARD_CATALOG_ID,
    theme: Theme | Mapping[str, Any] | None = None,
    send_data_model: bool | None = None,
) -> list[dict[str, Any]]:
    """Build the full opening sequence for a surface.

    The result is ``createSurface`` then ``updateComponents``, followed by an
    ``updateDataModel`` at the root when ``data_model`` is given.
    """
    messages = [
        create_surface(
            surface_id,
            catalog_id=catalog_id,
            theme=theme,
            send_data_model=send_data_model,
        ),
        update_components(surface_id, components),
    ]
    if data_model is not None:
        messages.append(update_data_model(surface_id, data_model))
    logger.debug(f"Built {len(messages)} messages for surface '{surface_id}'")
    return messages


__all__ = [
    "create_surface",
    "update_components",
    "update_data_model",
    "delete_surface",
    "create_messages",
]
