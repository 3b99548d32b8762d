"""Unit tests for surface sequences."""

import logging

import pytest

from a2ui.builders import IdGenerator, column, text
from a2ui.surface import (
    SurfaceId,
    build_chat_surface,
    build_notification_surface,
    build_surface,
    delete_surface_messages,
    generate_surface_id,
)
from a2ui.validation import ValidationOptions, validate_messages


@pytest.fixture
def components():
    greeting = text("Hello", id="greeting")
    return [column([greeting["id"]], id="root"), greeting]


class TestBuildSurface:
    """Tests for build_surface."""

    @pytest.mark.unit
    def test_sequence_without_data(self, components):
        result = build_surface("root", components, surface_id="s1")
        assert result.surface_id == "s1"
        assert [next(iter(m)) for m in result.messages] == [
            "createSurface",
            "updateComponents",
        ]

    @pytest.mark.unit
    def test_sequence_with_data(self, components):
        result = build_surface(
            "root", components, surface_id="s1", data_model={"user": "Ada"}
        )
        assert result.messages[-1] == {
            "updateDataModel": {"surfaceId": "s1", "value": {"user": "Ada"}}
        }

    @pytest.mark.unit
    def test_generated_id(self, components):
        ids = IdGenerator(prefix_separator="-")
        first = build_surface("root", components, ids=ids)
        second = build_surface("root", components, ids=ids)
        assert (first.surface_id, second.surface_id) == ("surface-1", "surface-2")

    @pytest.mark.unit
    def test_random_id_without_generator(self, components):
        result = build_surface("root", components)
        assert result.surface_id.startswith("surface_")

    @pytest.mark.unit
    def test_enum_surface_id(self, components):
        result = build_surface("root", components, surface_id=SurfaceId.STATUS)
        assert result.surface_id == "@status"
        assert result.messages[0]["createSurface"]["surfaceId"] == "@status"

    @pytest.mark.unit
    def test_missing_root_warns(self, components, caplog):
        with caplog.at_level(logging.WARNING, logger="a2ui.surface.lib"):
            result = build_surface("main", components, surface_id="s1")
        assert "Root component 'main' not found" in caplog.text
        assert len(result.messages) == 2

    @pytest.mark.unit
    def test_output_validates(self, components):
        result = build_surface(
            "root", components, surface_id="s1", theme={"primaryColor": "#336699"}
        )
        assert validate_messages(result.messages, ValidationOptions(strict=True)).valid


class TestShortcuts:
    """Tests for well-known surface shortcuts."""

    @pytest.mark.unit
    def test_chat(self, components):
        assert build_chat_surface("root", components).surface_id == "@chat"

    @pytest.mark.unit
    def test_notification_passes_options(self, components):
        result = build_notification_surface(
            "root", components, send_data_model=True
        )
        assert result.surface_id == "@notification"
        assert result.messages[0]["createSurface"]["sendDataModel"] is True

    @pytest.mark.unit
    def test_shortcut_names(self):
        assert build_chat_surface.__name__ == "build_chat_surface"


class TestSurfaceHelpers:
    """Tests for surface IDs and teardown."""

    @pytest.mark.unit
    def test_well_known_ids(self):
        assert [s.value for s in SurfaceId] == [
            "@chat",
            "@recommendation",
            "@input-form",
            "@orchestration",
            "@status",
            "@result",
            "@confirm",
            "@notification",
        ]

    @pytest.mark.unit
    def test_generate_surface_id(self):
        assert generate_surface_id(IdGenerator()) == "surface_1"
        assert generate_surface_id() != generate_surface_id()

    @pytest.mark.unit
    def test_delete_surface_messages(self):
        assert delete_surface_messages(SurfaceId.CHAT) == [
            {"deleteSurface": {"surfaceId": "@chat"}}
        ]
