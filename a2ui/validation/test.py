"""Unit tests for message validation."""

import pytest

from a2ui.schema import ProtocolVersion
from a2ui.validation import (
    ValidationCode,
    ValidationError,
    ValidationOptions,
    ValidationResult,
    ValidationWarning,
    is_valid,
    validate_message,
    validate_messages,
    validate_v08_message,
    validate_v09_message,
)


def _codes(issues):
    return [issue.code for issue in issues]


class TestScenarios:
    """End-to-end behaviour on representative messages."""

    @pytest.mark.unit
    def test_valid_create_surface(self):
        """A complete createSurface passes with no issues."""
        result = validate_message({"createSurface": {"surfaceId": "s1", "catalogId": "c1"}})
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.unit
    def test_missing_catalog_id(self):
        result = validate_message({"createSurface": {"surfaceId": "s1"}})
        assert not result.valid
        assert ValidationCode.MISSING_CATALOG_ID in _codes(result.errors)
        assert result.errors[0].path == "createSurface.catalogId"

    @pytest.mark.unit
    def test_duplicate_component_id(self):
        message = {
            "updateComponents": {
                "surfaceId": "s",
                "components": [
                    {"id": "x", "component": "Text", "text": "Hello"},
                    {"id": "x", "component": "Text", "text": "Hi"},
                ],
            }
        }
        result = validate_message(message)
        assert not result.valid
        duplicates = [
            e for e in result.errors if e.code == ValidationCode.DUPLICATE_COMPONENT_ID
        ]
        assert len(duplicates) == 1
        assert "components[1].id" in duplicates[0].path

    @pytest.mark.unit
    def test_button_missing_child_and_action(self):
        """Both missing fields are reported, not just the first."""
        message = {
            "updateComponents": {
                "surfaceId": "s",
                "components": [{"id": "b", "component": "Button"}],
            }
        }
        result = validate_message(message)
        missing = [
            e
            for e in result.errors
            if e.code == ValidationCode.MISSING_REQUIRED_PROPERTY
        ]
        assert len(missing) == 2
        assert "child" in missing[0].message
        assert "action" in missing[1].message

    @pytest.mark.unit
    def test_batch_prefixes_second_message(self):
        batch = [
            {"createSurface": {"surfaceId": "s1", "catalogId": "c1"}},
            {"updateComponents": {"surfaceId": "", "components": []}},
        ]
        result = validate_messages(batch)
        assert not result.valid
        assert result.errors[0].path.startswith("messages[1]")
        assert result.errors[0].path == "messages[1].updateComponents.surfaceId"

    @pytest.mark.unit
    def test_remove_with_value_warns(self):
        message = {
            "updateDataModel": {
                "surfaceId": "s",
                "path": "/x",
                "op": "remove",
                "value": "unused",
            }
        }
        result = validate_message(message)
        assert result.valid
        assert _codes(result.warnings) == [ValidationCode.UNNECESSARY_VALUE]


class TestMessageDispatch:
    """Tests for top-level kind detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "message",
        ["createSurface", None, 42, [], {}, {"unknown": {}}],
    )
    def test_unrecognized_message(self, message):
        """Malformed top levels never raise."""
        result = validate_message(message)
        assert _codes(result.errors) == [ValidationCode.INVALID_MESSAGE_TYPE]
        assert result.errors[0].path is None

    @pytest.mark.unit
    def test_two_kinds_rejected(self):
        message = {
            "createSurface": {"surfaceId": "s", "catalogId": "c"},
            "deleteSurface": {"surfaceId": "s"},
        }
        result = validate_message(message)
        assert _codes(result.errors) == [ValidationCode.INVALID_MESSAGE_TYPE]
        assert "createSurface, deleteSurface" in result.errors[0].message

    @pytest.mark.unit
    def test_non_mapping_body_treated_as_empty(self):
        result = validate_message({"createSurface": "oops"})
        assert _codes(result.errors) == [
            ValidationCode.MISSING_SURFACE_ID,
            ValidationCode.MISSING_CATALOG_ID,
        ]

    @pytest.mark.unit
    def test_pinned_version_rejects_other_keys(self):
        result = validate_v09_message({"beginRendering": {"surfaceId": "s", "root": "r"}})
        assert _codes(result.errors) == [ValidationCode.INVALID_MESSAGE_TYPE]
        result = validate_v08_message({"createSurface": {"surfaceId": "s", "catalogId": "c"}})
        assert _codes(result.errors) == [ValidationCode.INVALID_MESSAGE_TYPE]

    @pytest.mark.unit
    def test_delete_surface_both_versions(self):
        message = {"deleteSurface": {"surfaceId": "s"}}
        assert validate_v09_message(message).valid
        assert validate_v08_message(message).valid
        assert validate_message(message).valid

    @pytest.mark.unit
    def test_version_as_string(self):
        message = {"beginRendering": {"surfaceId": "s", "root": "root"}}
        assert validate_message(message, version="0.8").valid


class TestCreateSurface:
    """Tests for createSurface checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize("surface_id", ["", None, 0])
    def test_falsy_surface_id(self, surface_id):
        result = validate_message(
            {"createSurface": {"surfaceId": surface_id, "catalogId": "c"}}
        )
        assert _codes(result.errors) == [ValidationCode.MISSING_SURFACE_ID]
        assert result.errors[0].path == "createSurface.surfaceId"

    @pytest.mark.unit
    @pytest.mark.parametrize("color", ["red", "#FFF", "#12345G", "#1234567", 123, None])
    def test_bad_primary_color_warns(self, color):
        result = validate_message(
            {
                "createSurface": {
                    "surfaceId": "s",
                    "catalogId": "c",
                    "theme": {"primaryColor": color},
                }
            }
        )
        assert result.valid
        assert _codes(result.warnings) == [ValidationCode.INVALID_PRIMARY_COLOR]
        assert result.warnings[0].path == "createSurface.theme.primaryColor"

    @pytest.mark.unit
    def test_good_primary_color(self):
        result = validate_message(
            {
                "createSurface": {
                    "surfaceId": "s",
                    "catalogId": "c",
                    "theme": {"primaryColor": "#1a2B3c", "font": "Inter"},
                }
            }
        )
        assert result.warnings == []


class TestUpdateComponents:
    """Tests for updateComponents checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize("components", [None, "x", {"id": "a"}, 3])
    def test_non_list_components(self, components):
        """Component checks are skipped when the list is malformed."""
        result = validate_message(
            {"updateComponents": {"surfaceId": "s", "components": components}}
        )
        assert _codes(result.errors) == [ValidationCode.INVALID_COMPONENTS]
        assert result.errors[0].path == "updateComponents.components"

    @pytest.mark.unit
    def test_missing_components_key(self):
        result = validate_message({"updateComponents": {"surfaceId": "s"}})
        assert _codes(result.errors) == [ValidationCode.INVALID_COMPONENTS]

    @pytest.mark.unit
    def test_surface_and_component_errors_accumulate(self):
        result = validate_message(
            {"updateComponents": {"components": [{"component": "Card"}]}}
        )
        assert _codes(result.errors) == [
            ValidationCode.MISSING_SURFACE_ID,
            ValidationCode.MISSING_COMPONENT_ID,
            ValidationCode.MISSING_REQUIRED_PROPERTY,
        ]


class TestUpdateDataModel:
    """Tests for updateDataModel checks."""

    @pytest.mark.unit
    def test_add_without_value(self):
        result = validate_message(
            {"updateDataModel": {"surfaceId": "s", "path": "/x", "op": "add"}}
        )
        assert _codes(result.errors) == [ValidationCode.MISSING_VALUE]

    @pytest.mark.unit
    def test_add_with_null_value(self):
        """A null value is present, so add is satisfied."""
        result = validate_message(
            {"updateDataModel": {"surfaceId": "s", "op": "add", "value": None}}
        )
        assert result.valid

    @pytest.mark.unit
    @pytest.mark.parametrize("op", ["merge", "", None, 1, ["add"]])
    def test_invalid_op(self, op):
        result = validate_message({"updateDataModel": {"surfaceId": "s", "op": op}})
        assert _codes(result.errors) == [ValidationCode.INVALID_OP]

    @pytest.mark.unit
    def test_replace_is_valid(self):
        result = validate_message(
            {"updateDataModel": {"surfaceId": "s", "op": "replace", "value": 1}}
        )
        assert result.valid and result.warnings == []

    @pytest.mark.unit
    def test_no_op_skips_op_checks(self):
        result = validate_message({"updateDataModel": {"surfaceId": "s", "path": "/x"}})
        assert result.valid and result.warnings == []


class TestV08Messages:
    """Tests for protocol v0.8 messages."""

    @pytest.mark.unit
    def test_begin_rendering_requires_root(self):
        result = validate_message({"beginRendering": {"surfaceId": "s"}})
        assert _codes(result.errors) == [ValidationCode.MISSING_ROOT]

    @pytest.mark.unit
    def test_begin_rendering_styles_color(self):
        result = validate_message(
            {
                "beginRendering": {
                    "surfaceId": "s",
                    "root": "root",
                    "styles": {"primaryColor": "blue"},
                }
            }
        )
        assert result.valid
        assert result.warnings[0].path == "beginRendering.styles.primaryColor"

    @pytest.mark.unit
    def test_surface_update_components(self):
        result = validate_message(
            {
                "surfaceUpdate": {
                    "surfaceId": "s",
                    "components": [
                        {"id": "t", "component": {"Text": {"text": {"literalString": "Hi"}}}},
                        {"id": "tabs", "component": {"Tabs": {}}},
                    ],
                }
            }
        )
        assert _codes(result.errors) == [ValidationCode.MISSING_REQUIRED_PROPERTY]
        assert result.errors[0].path == "surfaceUpdate.components[1].component.Tabs.tabItems"

    @pytest.mark.unit
    def test_data_model_update_contents(self):
        assert validate_message(
            {"dataModelUpdate": {"surfaceId": "s", "contents": []}}
        ).valid
        result = validate_message({"dataModelUpdate": {"surfaceId": "s"}})
        assert _codes(result.errors) == [ValidationCode.INVALID_CONTENTS]


class TestBatch:
    """Tests for batch validation."""

    @pytest.mark.unit
    def test_non_list_batch(self):
        result = validate_messages({"createSurface": {}})
        assert _codes(result.errors) == [ValidationCode.INVALID_MESSAGE_TYPE]
        assert result.errors[0].path == "messages"

    @pytest.mark.unit
    def test_pathless_issue_becomes_index(self):
        result = validate_messages([{"deleteSurface": {"surfaceId": "s"}}, "junk"])
        assert result.errors[0].path == "messages[1]"

    @pytest.mark.unit
    def test_empty_batch_valid(self):
        assert validate_messages([]).valid

    @pytest.mark.unit
    def test_order_follows_input(self):
        batch = [{"deleteSurface": {}} for _ in range(5)]
        result = validate_messages(batch)
        assert [e.path for e in result.errors] == [
            f"messages[{i}].deleteSurface.surfaceId" for i in range(5)
        ]

    @pytest.mark.unit
    def test_threaded_matches_sequential(self, invalid_batch):
        sequential = validate_messages(invalid_batch, {"strict": True})
        threaded = validate_messages(invalid_batch, {"strict": True}, max_workers=4)
        assert threaded == sequential

    @pytest.mark.unit
    def test_version_applies_to_every_message(self):
        batch = [
            {"beginRendering": {"surfaceId": "s", "root": "root"}},
            {"createSurface": {"surfaceId": "s", "catalogId": "c"}},
        ]
        result = validate_messages(batch, version=ProtocolVersion.V0_8)
        assert [e.path for e in result.errors] == ["messages[1]"]


class TestProperties:
    """Cross-cutting guarantees."""

    @pytest.mark.unit
    def test_idempotent(self, invalid_batch):
        first = validate_messages(invalid_batch, {"strict": True})
        second = validate_messages(invalid_batch, {"strict": True})
        assert first == second
        assert first.to_dict() == second.to_dict()

    @pytest.mark.unit
    def test_strict_only_adds_warnings(self, invalid_batch):
        lenient = validate_messages(invalid_batch)
        strict = validate_messages(invalid_batch, ValidationOptions(strict=True))
        assert strict.errors == lenient.errors
        assert set(lenient.warnings) <= set(strict.warnings)
        assert len(strict.warnings) > len(lenient.warnings)

    @pytest.mark.unit
    def test_slider_reports_every_missing_field(self):
        result = validate_message(
            {
                "updateComponents": {
                    "surfaceId": "s",
                    "components": [{"id": "root", "component": "Slider"}],
                }
            }
        )
        paths = [e.path for e in result.errors]
        assert paths == [
            "updateComponents.components[0].value",
            "updateComponents.components[0].min",
            "updateComponents.components[0].max",
        ]

    @pytest.mark.unit
    def test_is_valid(self):
        assert is_valid({"deleteSurface": {"surfaceId": "s"}})
        assert not is_valid({"deleteSurface": {}})


class TestResultModel:
    """Tests for result and option types."""

    @pytest.mark.unit
    def test_codes_compare_to_strings(self):
        assert ValidationCode.MISSING_VALUE == "MISSING_VALUE"

    @pytest.mark.unit
    def test_to_dict_omits_missing_path(self):
        result = ValidationResult()
        result.error(ValidationCode.INVALID_MESSAGE_TYPE, "bad")
        result.warn(ValidationCode.UNNECESSARY_VALUE, "unused", "updateDataModel.value")
        assert result.to_dict() == {
            "valid": False,
            "errors": [{"code": "INVALID_MESSAGE_TYPE", "message": "bad"}],
            "warnings": [
                {
                    "code": "UNNECESSARY_VALUE",
                    "message": "unused",
                    "path": "updateDataModel.value",
                }
            ],
        }

    @pytest.mark.unit
    def test_prefix_keeps_issue_class(self):
        warning = ValidationWarning(ValidationCode.UNNECESSARY_VALUE, "m", "a.b")
        prefixed = warning.with_prefix("messages[0]")
        assert isinstance(prefixed, ValidationWarning)
        assert prefixed.path == "messages[0].a.b"
        error = ValidationError(ValidationCode.INVALID_MESSAGE_TYPE, "m")
        assert error.with_prefix("messages[3]").path == "messages[3]"

    @pytest.mark.unit
    def test_options_coerce(self):
        opts = ValidationOptions.coerce({"strict": True, "allowedComponents": ["Chart"]})
        assert opts.strict is True
        assert opts.allowed_components == ("Chart",)
        assert opts.allows("Chart")
        assert not ValidationOptions.coerce(None).allows("Chart")
        assert ValidationOptions.coerce(opts) is opts
