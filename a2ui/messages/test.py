"""Unit tests for message kinds, models and JSONL framing."""

import pytest
from pydantic import ValidationError

from a2ui.messages import (
    STANDARD_CATALOG_ID,
    CreateSurface,
    CreateSurfaceMessage,
    MessageKind,
    UpdateDataModel,
    ValueMap,
    detect_version,
    jsonl_to_messages,
    messages_to_jsonl,
    recognized_kinds,
)
from a2ui.schema import ProtocolVersion


class TestRecognizedKinds:
    """Tests for kind-key detection."""

    @pytest.mark.unit
    def test_single_kind(self):
        assert recognized_kinds({"createSurface": {}}) == [MessageKind.CREATE_SURFACE]

    @pytest.mark.unit
    def test_unrelated_keys_ignored(self):
        assert recognized_kinds({"deleteSurface": {}, "meta": 1}) == [
            MessageKind.DELETE_SURFACE
        ]

    @pytest.mark.unit
    def test_multiple_kinds(self):
        kinds = recognized_kinds({"createSurface": {}, "deleteSurface": {}})
        assert len(kinds) == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "createSurface", [], 3])
    def test_non_mapping(self, value):
        assert recognized_kinds(value) == []

    @pytest.mark.unit
    def test_version_restricts_keys(self):
        message = {"beginRendering": {}}
        assert recognized_kinds(message, ProtocolVersion.V0_9) == []
        assert recognized_kinds(message, ProtocolVersion.V0_8) == [
            MessageKind.BEGIN_RENDERING
        ]


class TestDetectVersion:
    """Tests for structural version inference."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("createSurface", ProtocolVersion.V0_9),
            ("updateComponents", ProtocolVersion.V0_9),
            ("updateDataModel", ProtocolVersion.V0_9),
            ("deleteSurface", ProtocolVersion.V0_9),
            ("beginRendering", ProtocolVersion.V0_8),
            ("surfaceUpdate", ProtocolVersion.V0_8),
            ("dataModelUpdate", ProtocolVersion.V0_8),
        ],
    )
    def test_key_to_version(self, key, expected):
        assert detect_version({key: {}}) is expected

    @pytest.mark.unit
    def test_ambiguous_returns_none(self):
        assert detect_version({"createSurface": {}, "surfaceUpdate": {}}) is None
        assert detect_version({}) is None


class TestModels:
    """Tests for message envelope models."""

    @pytest.mark.unit
    def test_create_surface_defaults_to_standard_catalog(self):
        body = CreateSurface(surface_id="s1")
        assert body.catalog_id == STANDARD_CATALOG_ID

    @pytest.mark.unit
    def test_theme_color_pattern(self):
        with pytest.raises(ValidationError):
            CreateSurface.model_validate(
                {"surfaceId": "s1", "theme": {"primaryColor": "red"}}
            )

    @pytest.mark.unit
    def test_empty_surface_id_rejected(self):
        with pytest.raises(ValidationError):
            CreateSurface(surface_id="")

    @pytest.mark.unit
    def test_invalid_op_rejected(self):
        with pytest.raises(ValidationError):
            UpdateDataModel(surface_id="s", op="merge")

    @pytest.mark.unit
    def test_nested_value_map(self):
        entry = ValueMap.model_validate(
            {"key": "user", "valueMap": [{"key": "age", "valueNumber": 30}]}
        )
        assert entry.value_map[0].value_number == 30


class TestJsonl:
    """Tests for JSON Lines framing."""

    @pytest.mark.unit
    def test_serialize_models_and_dicts(self):
        message = CreateSurfaceMessage(
            create_surface=CreateSurface(surface_id="s1", catalog_id="c1")
        )
        text = messages_to_jsonl([message, {"deleteSurface": {"surfaceId": "s1"}}])
        assert text == (
            '{"createSurface":{"surfaceId":"s1","catalogId":"c1"}}\n'
            '{"deleteSurface":{"surfaceId":"s1"}}\n'
        )

    @pytest.mark.unit
    def test_parse_skips_blank_lines(self):
        text = '{"deleteSurface":{"surfaceId":"a"}}\n\n  \n{"deleteSurface":{"surfaceId":"b"}}'
        messages = jsonl_to_messages(text)
        assert [m["deleteSurface"]["surfaceId"] for m in messages] == ["a", "b"]

    @pytest.mark.unit
    def test_parse_error_names_line(self):
        text = '{"deleteSurface":{"surfaceId":"a"}}\n{not json}\n'
        with pytest.raises(ValueError, match="line 2"):
            jsonl_to_messages(text)

    @pytest.mark.unit
    def test_empty_stream(self):
        assert messages_to_jsonl([]) == ""
        assert jsonl_to_messages("") == []
