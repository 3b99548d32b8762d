"""Unit tests for JSON Schema cross-validation."""

import json
import shutil
from concurrent.futures import ThreadPoolExecutor

import pytest
from jsonschema import Draft202012Validator

from a2ui.conformance import (
    PACKAGED_SCHEMA_DIR,
    SCHEMA_FILES,
    SchemaLoadError,
    SchemaValidator,
    get_schema_validator,
    json_pointer,
    reset_schema_validator,
    validate_client_message,
    validate_messages_with_schema,
    validate_with_schema,
)


@pytest.fixture(scope="module")
def validator():
    return SchemaValidator(PACKAGED_SCHEMA_DIR)


def _components_message(*components):
    return {"updateComponents": {"surfaceId": "s", "components": list(components)}}


class TestPackagedSchemas:
    """Tests for the schema documents themselves."""

    @pytest.mark.unit
    @pytest.mark.parametrize("filename", SCHEMA_FILES)
    def test_documents_are_valid_schemas(self, filename):
        with open(PACKAGED_SCHEMA_DIR / filename, encoding="utf-8") as f:
            Draft202012Validator.check_schema(json.load(f))


class TestServerMessages:
    """Tests for server-to-client envelope validation."""

    @pytest.mark.unit
    def test_valid_create_surface(self, validator):
        result = validator.validate_server_message(
            {"createSurface": {"surfaceId": "s1", "catalogId": "c1"}}
        )
        assert result.valid
        assert result.errors == []

    @pytest.mark.unit
    def test_missing_catalog_id(self, validator):
        result = validator.validate_server_message({"createSurface": {"surfaceId": "s1"}})
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/createSurface", "required")
        ]
        assert result.errors[0].expected == ["surfaceId", "catalogId"]

    @pytest.mark.unit
    @pytest.mark.parametrize("message", ["junk", None, [], 3])
    def test_non_object_at_root(self, validator, message):
        result = validator.validate_server_message(message)
        assert [(e.path, e.keyword) for e in result.errors] == [("/", "type")]

    @pytest.mark.unit
    def test_exactly_one_kind(self, validator):
        result = validator.validate_server_message(
            {
                "createSurface": {"surfaceId": "s", "catalogId": "c"},
                "deleteSurface": {"surfaceId": "s"},
            }
        )
        assert [e.keyword for e in result.errors] == ["maxProperties"]

    @pytest.mark.unit
    def test_unknown_kind_key(self, validator):
        result = validator.validate_server_message({"beginRendering": {}})
        keywords = {e.keyword for e in result.errors}
        assert "additionalProperties" in keywords

    @pytest.mark.unit
    def test_bad_primary_color_is_an_error(self, validator):
        """The schema is stricter than the hand-written warning."""
        result = validator.validate_server_message(
            {
                "createSurface": {
                    "surfaceId": "s",
                    "catalogId": "c",
                    "theme": {"primaryColor": "red"},
                }
            }
        )
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/createSurface/theme/primaryColor", "pattern")
        ]

    @pytest.mark.unit
    def test_add_requires_value(self, validator):
        result = validator.validate_server_message(
            {"updateDataModel": {"surfaceId": "s", "path": "/x", "op": "add"}}
        )
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/updateDataModel", "required")
        ]

    @pytest.mark.unit
    def test_remove_with_value_allowed(self, validator):
        result = validator.validate_server_message(
            {"updateDataModel": {"surfaceId": "s", "op": "remove", "value": 1}}
        )
        assert result.valid


class TestComponentSchemas:
    """Tests for component checks inside updateComponents."""

    @pytest.mark.unit
    def test_valid_tree(self, validator):
        message = _components_message(
            {"id": "root", "component": "Column", "children": ["title", "ok"]},
            {"id": "title", "component": "Text", "text": {"path": "/title"}},
            {"id": "label", "component": "Text", "text": "OK"},
            {
                "id": "ok",
                "component": "Button",
                "child": "label",
                "action": {"event": {"name": "confirm", "context": {"id": {"path": "/id"}}}},
            },
        )
        assert validator.validate_server_message(message).valid

    @pytest.mark.unit
    def test_missing_required_field(self, validator):
        result = validator.validate_server_message(
            _components_message({"id": "s", "component": "Slider", "value": 1})
        )
        # one error per missing property
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/updateComponents/components/0", "required"),
            ("/updateComponents/components/0", "required"),
        ]
        assert "'min'" in result.errors[0].message
        assert "'max'" in result.errors[1].message

    @pytest.mark.unit
    def test_legacy_tabs_rejected(self, validator):
        """Legacy field names are accepted by the hand-written validator only."""
        result = validator.validate_server_message(
            _components_message(
                {"id": "t", "component": "Tabs", "tabItems": [{"title": "A", "child": "a"}]}
            )
        )
        assert not result.valid
        assert result.errors[0].expected == ["tabs"]

    @pytest.mark.unit
    def test_bare_action_rejected(self, validator):
        result = validator.validate_server_message(
            _components_message(
                {"id": "b", "component": "Button", "child": "l", "action": {"name": "submit"}}
            )
        )
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/updateComponents/components/0/action", "oneOf")
        ]

    @pytest.mark.unit
    def test_function_call_action_accepted(self, validator):
        result = validator.validate_server_message(
            _components_message(
                {
                    "id": "b",
                    "component": "Button",
                    "child": "l",
                    "action": {"functionCall": {"call": "openUrl", "args": ["https://a2ui.dev"]}},
                }
            )
        )
        assert result.valid

    @pytest.mark.unit
    def test_open_component_maps(self, validator):
        """Unknown kinds and extra keys pass; known keys are type-checked."""
        result = validator.validate_server_message(
            _components_message(
                {"id": "c", "component": "Chart", "series": []},
                {"id": "t", "component": "Text", "text": "Hi", "x-trace": 1},
            )
        )
        assert result.valid

    @pytest.mark.unit
    def test_known_property_type_checked(self, validator):
        result = validator.validate_server_message(
            _components_message({"id": "t", "component": "Text", "text": "Hi", "variant": "h9"})
        )
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/updateComponents/components/0/variant", "enum")
        ]


class TestClientMessages:
    """Tests for client-to-server envelope validation."""

    @pytest.mark.unit
    def test_valid_user_action(self, validator):
        result = validator.validate_client_message(
            {
                "userAction": {
                    "name": "submit",
                    "surfaceId": "s1",
                    "sourceComponentId": "ok",
                    "timestamp": "2025-06-01T12:30:00Z",
                    "context": {"email": "a@b.c"},
                }
            }
        )
        assert result.valid

    @pytest.mark.unit
    def test_timestamp_format_checked(self, validator):
        result = validator.validate_client_message(
            {
                "userAction": {
                    "name": "submit",
                    "surfaceId": "s1",
                    "sourceComponentId": "ok",
                    "timestamp": "yesterday",
                }
            }
        )
        assert [(e.path, e.keyword) for e in result.errors] == [
            ("/userAction/timestamp", "format")
        ]

    @pytest.mark.unit
    def test_error_envelope(self, validator):
        assert validator.validate_client_message(
            {"error": {"code": "RENDER_FAILED", "surfaceId": "s1", "message": "boom"}}
        ).valid
        result = validator.validate_client_message({"error": {"code": "X"}})
        assert [e.keyword for e in result.errors] == ["required", "required"]

    @pytest.mark.unit
    def test_data_change(self, validator):
        assert validator.validate_client_message(
            {
                "dataChange": {
                    "surfaceId": "s1",
                    "path": "/form/email",
                    "value": "a@b.c",
                    "sourceComponentId": "email",
                }
            }
        ).valid


class TestBatch:
    """Tests for batch schema validation."""

    @pytest.mark.unit
    def test_paths_prefixed_by_index(self, validator):
        result = validator.validate_messages(
            [
                {"deleteSurface": {"surfaceId": "s"}},
                {"createSurface": {"surfaceId": "s"}},
                "junk",
            ]
        )
        assert [e.path for e in result.errors] == [
            "/messages/1/createSurface",
            "/messages/2",
        ]

    @pytest.mark.unit
    def test_non_list_batch(self, validator):
        result = validator.validate_messages({"deleteSurface": {"surfaceId": "s"}})
        assert not result.valid
        assert result.errors[0].keyword == "type"


class TestCompilation:
    """Tests for lazy, one-time compilation."""

    @pytest.mark.unit
    def test_lazy_compile(self):
        fresh = SchemaValidator(PACKAGED_SCHEMA_DIR)
        assert not fresh.is_compiled
        fresh.validate_server_message({"deleteSurface": {"surfaceId": "s"}})
        assert fresh.is_compiled
        assert fresh.compile_count == 1

    @pytest.mark.unit
    def test_racing_threads_compile_once(self):
        fresh = SchemaValidator(PACKAGED_SCHEMA_DIR)
        message = {"deleteSurface": {"surfaceId": "s"}}
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(lambda _: fresh.validate_server_message(message), range(32))
            )
        assert all(r.valid for r in results)
        assert fresh.compile_count == 1

    @pytest.mark.unit
    def test_missing_directory(self, tmp_path):
        broken = SchemaValidator(tmp_path / "nowhere")
        with pytest.raises(SchemaLoadError, match="not found"):
            broken.compile()

    @pytest.mark.unit
    def test_unreadable_document(self, tmp_path):
        for name in SCHEMA_FILES:
            shutil.copy(PACKAGED_SCHEMA_DIR / name, tmp_path / name)
        (tmp_path / "common_types.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaLoadError, match="Failed to read"):
            SchemaValidator(tmp_path).compile()

    @pytest.mark.unit
    def test_invalid_schema_document(self, tmp_path):
        for name in SCHEMA_FILES:
            shutil.copy(PACKAGED_SCHEMA_DIR / name, tmp_path / name)
        (tmp_path / "client_to_server.json").write_text(
            json.dumps({"type": 12}), encoding="utf-8"
        )
        with pytest.raises(SchemaLoadError, match="Invalid schema"):
            SchemaValidator(tmp_path).compile()

    @pytest.mark.unit
    def test_schema_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("A2UI_SCHEMA_DIR", str(tmp_path))
        assert SchemaValidator().schema_dir == tmp_path

    @pytest.mark.unit
    def test_explicit_dir_wins_over_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("A2UI_SCHEMA_DIR", str(tmp_path))
        assert SchemaValidator(PACKAGED_SCHEMA_DIR).schema_dir == PACKAGED_SCHEMA_DIR


class TestDefaultInstance:
    """Tests for the module-level convenience wrappers."""

    @pytest.fixture(autouse=True)
    def _fresh_default(self, monkeypatch):
        monkeypatch.delenv("A2UI_SCHEMA_DIR", raising=False)
        reset_schema_validator()
        yield
        reset_schema_validator()

    @pytest.mark.unit
    def test_singleton(self):
        assert get_schema_validator() is get_schema_validator()

    @pytest.mark.unit
    def test_reset(self):
        first = get_schema_validator()
        reset_schema_validator()
        assert get_schema_validator() is not first

    @pytest.mark.unit
    def test_wrappers(self):
        assert validate_with_schema({"deleteSurface": {"surfaceId": "s"}}).valid
        assert not validate_client_message({"userAction": {}}).valid
        result = validate_messages_with_schema([{"deleteSurface": {}}])
        assert result.errors[0].path == "/messages/0/deleteSurface"


class TestJsonPointer:
    """Tests for pointer formatting."""

    @pytest.mark.unit
    def test_root(self):
        assert json_pointer([]) == "/"

    @pytest.mark.unit
    def test_escaping(self):
        assert json_pointer(["a/b", "c~d", 0]) == "/a~1b/c~0d/0"
