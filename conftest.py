"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Shared message fixtures
"""

from __future__ import annotations

from typing import Any

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def valid_batch() -> list[dict[str, Any]]:
    """A well-formed v0.9 opening sequence for one surface.

    Returns:
        createSurface, updateComponents and updateDataModel messages.
    """
    return [
        {
            "createSurface": {
                "surfaceId": "booking",
                "catalogId": "https://a2ui.dev/specification/0.9/standard_catalog_definition.json",
                "theme": {"primaryColor": "#00BFFF"},
            }
        },
        {
            "updateComponents": {
                "surfaceId": "booking",
                "components": [
                    {"id": "root", "component": "Column", "children": ["title", "go"]},
                    {"id": "title", "component": "Text", "text": "Book a table"},
                    {"id": "go_label", "component": "Text", "text": "Book"},
                    {
                        "id": "go",
                        "component": "Button",
                        "child": "go_label",
                        "action": {"event": {"name": "book"}},
                    },
                ],
            }
        },
        {
            "updateDataModel": {
                "surfaceId": "booking",
                "path": "/reservation",
                "op": "replace",
                "value": {"guests": 2},
            }
        },
    ]


@pytest.fixture
def invalid_batch() -> list[Any]:
    """A batch mixing errors with issues only strict mode reports.

    Contains a missing catalog ID, a Slider without ``min``/``max``, a bad
    ``op``, a non-object message, an unknown component kind, a surface with
    no ``root`` component, a v0.8 bare action and an invalid theme color.
    """
    return [
        {"createSurface": {"surfaceId": "s1", "theme": {"primaryColor": "blue"}}},
        {
            "updateComponents": {
                "surfaceId": "s1",
                "components": [
                    {"id": "main", "component": "Column", "children": ["volume"]},
                    {"id": "volume", "component": "Slider", "value": 5},
                    {"id": "map", "component": "GeoMap"},
                    {
                        "id": "send",
                        "component": "Button",
                        "child": "main",
                        "action": {"name": "send"},
                    },
                ],
            }
        },
        {"updateDataModel": {"surfaceId": "s1", "op": "merge", "value": 1}},
        "not a message",
        {"deleteSurface": {"surfaceId": ""}},
    ]
