"""Surface message sequences and well-known surface IDs.

A surface is opened with ``createSurface`` followed by ``updateComponents``
(and ``updateDataModel`` when initial data is given). These helpers build
that sequence in one call and hand back the surface ID used.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from a2ui.builders import IdGenerator, create_messages, delete_surface, random_id
from a2ui.messages import Theme

logger = logging.getLogger(__name__)


class SurfaceId(str, Enum):
    """Well-known surface IDs shared by agents and renderers."""

    CHAT = "@chat"
    RECOMMENDATION = "@recommendation"
    INPUT_FORM = "@input-form"
    ORCHESTRATION = "@orchestration"
    STATUS = "@status"
    RESULT = "@result"
    CONFIRM = "@confirm"
    NOTIFICATION = "@notification"


@dataclass
class SurfaceResult:
    """Messages that open a surface, and the ID they target."""

    messages: list[dict[str, Any]] = field(default_factory=list)
    surface_id: str = ""


def generate_surface_id(ids: IdGenerator | None = None) -> str:
    """New surface ID: sequential with ``ids``, random otherwise.

    Example:
        >>> generate_surface_id(IdGenerator(prefix_separator="-"))
        'surface-1'
    """
    if ids is not None:
        return ids.next("surface")
    return random_id("surface")


def build_surface(
    root_id: str,
    components: Sequence[Mapping[str, Any]],
    *,
    surface_id: SurfaceId | str | None = None,
    data_model: Any = None,
    theme: Theme | Mapping[str, Any] | None = None,
    send_data_model: bool | None = None,
    ids: IdGenerator | None = None,
) -> SurfaceResult:
    """Build the opening message sequence for a surface.

    Args:
        root_id: ID of the component the renderer starts from.
        components: Component wire dicts, typically from `a2ui.builders`.
        surface_id: Target surface; generated when omitted.
        data_model: Initial data model, sent at the root when given.
        theme: Surface theme.
        send_data_model: Ask the client to echo its data model.
        ids: Generator for the surface ID when ``surface_id`` is omitted.

    Returns:
        SurfaceResult with the messages and the surface ID.
    """
    if isinstance(surface_id, SurfaceId):
        surface_id = surface_id.value
    resolved = surface_id or generate_surface_id(ids)

    if not any(c.get("id") == root_id for c in components):
        logger.warning(
            f"Root component '{root_id}' not found in components of surface '{resolved}'"
        )

    messages = create_messages(
        resolved,
        components,
        data_model=data_model,
        theme=theme,
        send_data_model=send_data_model,
    )
    return SurfaceResult(messages=messages, surface_id=resolved)


def delete_surface_messages(surface_id: SurfaceId | str) -> list[dict[str, Any]]:
    """Messages that tear down a surface."""
    if isinstance(surface_id, SurfaceId):
        surface_id = surface_id.value
    return [delete_surface(surface_id)]


def _shortcut(well_known: SurfaceId):
    def build(
        root_id: str, components: Sequence[Mapping[str, Any]], **kwargs: Any
    ) -> SurfaceResult:
        return build_surface(root_id, components, surface_id=well_known, **kwargs)

    build.__name__ = f"build_{well_known.name.lower()}_surface"
    build.__doc__ = f"Build the opening sequence for the ``{well_known.value}`` surface."
    return build


build_chat_surface = _shortcut(SurfaceId.CHAT)
build_recommendation_surface = _shortcut(SurfaceId.RECOMMENDATION)
build_input_form_surface = _shortcut(SurfaceId.INPUT_FORM)
build_orchestration_surface = _shortcut(SurfaceId.ORCHESTRATION)
build_status_surface = _shortcut(SurfaceId.STATUS)
build_result_surface = _shortcut(SurfaceId.RESULT)
build_confirm_surface = _shortcut(SurfaceId.CONFIRM)
build_notification_surface = _shortcut(SurfaceId.NOTIFICATION)


__all__ = [
    "SurfaceId",
    "SurfaceResult",
    "generate_surface_id",
    "build_surface",
    "delete_surface_messages",
    "build_chat_surface",
    "build_recommendation_surface",
    "build_input_form_surface",
    "build_orchestration_surface",
    "build_status_surface",
    "build_result_surface",
    "build_confirm_surface",
    "build_notification_surface",
]
