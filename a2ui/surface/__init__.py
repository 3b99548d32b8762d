"""Surface opening sequences and well-known surface IDs.

Example usage:
    >>> from a2ui.builders import text
    >>> from a2ui.surface import build_chat_surface
    >>> result = build_chat_surface("root", [text("Hi", id="root")])
    >>> result.surface_id
    '@chat'
"""

from .lib import (
    SurfaceId,
    SurfaceResult,
    build_chat_surface,
    build_confirm_surface,
    build_input_form_surface,
    build_notification_surface,
    build_orchestration_surface,
    build_recommendation_surface,
    build_result_surface,
    build_status_surface,
    build_surface,
    delete_surface_messages,
    generate_surface_id,
)

__all__ = [
    "SurfaceId",
    "SurfaceResult",
    "generate_surface_id",
    "build_surface",
    "delete_surface_messages",
    # Shortcuts
    "build_chat_surface",
    "build_recommendation_surface",
    "build_input_form_surface",
    "build_orchestration_surface",
    "build_status_surface",
    "build_result_surface",
    "build_confirm_surface",
    "build_notification_surface",
]
