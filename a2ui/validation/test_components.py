"""Unit tests for component list validation."""

import pytest

from a2ui.schema import ComponentType, ProtocolVersion, required_fields_for
from a2ui.validation import ValidationCode, ValidationOptions, validate_components

STRICT = ValidationOptions(strict=True)


def _codes(issues):
    return [issue.code for issue in issues]


class TestComponentIds:
    """Tests for ID presence and uniqueness."""

    @pytest.mark.unit
    @pytest.mark.parametrize("bad_id", [None, "", 7, ["root"]])
    def test_missing_or_non_string_id(self, bad_id):
        result = validate_components([{"id": bad_id, "component": "Divider"}])
        assert _codes(result.errors) == [ValidationCode.MISSING_COMPONENT_ID]
        assert result.errors[0].path == "updateComponents.components[0].id"

    @pytest.mark.unit
    def test_absent_id(self):
        result = validate_components([{"component": "Divider"}])
        assert _codes(result.errors) == [ValidationCode.MISSING_COMPONENT_ID]

    @pytest.mark.unit
    def test_every_duplicate_reported(self):
        components = [{"id": "a", "component": "Divider"} for _ in range(3)]
        result = validate_components(components)
        assert _codes(result.errors) == [ValidationCode.DUPLICATE_COMPONENT_ID] * 2
        assert [e.path for e in result.errors] == [
            "updateComponents.components[1].id",
            "updateComponents.components[2].id",
        ]

    @pytest.mark.unit
    def test_non_mapping_entry(self):
        """A non-object entry is reported, never skipped."""
        result = validate_components(["root", None])
        assert _codes(result.errors) == [
            ValidationCode.MISSING_COMPONENT_ID,
            ValidationCode.MISSING_COMPONENT_TYPE,
        ] * 2


class TestComponentKinds:
    """Tests for kind presence and registry lookup."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [None, "", 3, {"Text": {}}])
    def test_missing_kind(self, kind):
        result = validate_components([{"id": "a", "component": kind}])
        assert _codes(result.errors) == [ValidationCode.MISSING_COMPONENT_TYPE]
        assert result.errors[0].path == "updateComponents.components[0].component"

    @pytest.mark.unit
    def test_unknown_kind_silent_by_default(self):
        result = validate_components([{"id": "root", "component": "Chart"}])
        assert result.valid
        assert result.warnings == []

    @pytest.mark.unit
    def test_unknown_kind_warns_in_strict(self):
        result = validate_components([{"id": "root", "component": "Chart"}], STRICT)
        assert result.valid
        assert _codes(result.warnings) == [ValidationCode.UNKNOWN_COMPONENT_TYPE]
        assert result.warnings[0].path == "updateComponents.components[0].component"

    @pytest.mark.unit
    def test_allowed_kind_suppresses_warning(self):
        result = validate_components(
            [{"id": "root", "component": "Chart"}],
            {"strict": True, "allowedComponents": ["Chart"]},
        )
        assert result.warnings == []

    @pytest.mark.unit
    def test_kind_lookup_is_case_sensitive(self):
        result = validate_components([{"id": "root", "component": "text"}], STRICT)
        assert result.valid
        assert _codes(result.warnings) == [ValidationCode.UNKNOWN_COMPONENT_TYPE]


class TestRequiredProperties:
    """Tests for the required-property check."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", [ct.value for ct in ComponentType])
    def test_bare_component_reports_each_required_field(self, kind):
        result = validate_components([{"id": "root", "component": kind}])
        expected = required_fields_for(kind)
        assert _codes(result.errors) == (
            [ValidationCode.MISSING_REQUIRED_PROPERTY] * len(expected)
        )
        assert [e.path.rsplit(".", 1)[1] for e in result.errors] == expected

    @pytest.mark.unit
    def test_null_counts_as_present(self):
        result = validate_components(
            [{"id": "root", "component": "CheckBox", "label": None, "value": False}]
        )
        assert result.valid

    @pytest.mark.unit
    def test_bindings_satisfy_requirements(self):
        result = validate_components(
            [{"id": "root", "component": "Text", "text": {"path": "/greeting"}}]
        )
        assert result.valid

    @pytest.mark.unit
    def test_message_names_component(self):
        result = validate_components([{"id": "save", "component": "Card"}])
        assert "'save'" in result.errors[0].message
        assert "'child'" in result.errors[0].message

    @pytest.mark.unit
    def test_legacy_aliases_accepted_in_v09(self):
        components = [
            {"id": "root", "component": "Tabs", "tabItems": []},
            {
                "id": "m",
                "component": "Modal",
                "entryPointChild": "open",
                "contentChild": "body",
            },
        ]
        assert validate_components(components).valid

    @pytest.mark.unit
    def test_extra_keys_tolerated(self):
        result = validate_components(
            [{"id": "root", "component": "Divider", "x-custom": {"a": 1}}], STRICT
        )
        assert result.valid
        assert result.warnings == []


class TestRootComponent:
    """Tests for the strict-mode root check."""

    @pytest.mark.unit
    def test_missing_root_warns_in_strict(self):
        result = validate_components([{"id": "a", "component": "Divider"}], STRICT)
        assert result.valid
        assert _codes(result.warnings) == [ValidationCode.MISSING_ROOT_COMPONENT]
        assert result.warnings[0].path == "updateComponents.components"

    @pytest.mark.unit
    def test_missing_root_silent_by_default(self):
        result = validate_components([{"id": "a", "component": "Divider"}])
        assert result.warnings == []

    @pytest.mark.unit
    def test_empty_list_strict(self):
        result = validate_components([], STRICT)
        assert _codes(result.warnings) == [ValidationCode.MISSING_ROOT_COMPONENT]

    @pytest.mark.unit
    def test_custom_base_path(self):
        result = validate_components([], STRICT, base_path="payload.items")
        assert result.warnings[0].path == "payload.items"


class TestActionShape:
    """Tests for the strict-mode action shape check."""

    @pytest.mark.unit
    def test_bare_action_flagged_in_strict_v09(self):
        components = [
            {"id": "root", "component": "Button", "child": "t", "action": {"name": "submit"}}
        ]
        lenient = validate_components(components)
        assert lenient.valid and lenient.warnings == []

        strict = validate_components(components, STRICT)
        assert strict.valid
        assert _codes(strict.warnings) == [ValidationCode.INVALID_ACTION_SHAPE]
        assert strict.warnings[0].path == "updateComponents.components[0].action"

    @pytest.mark.unit
    def test_event_action_accepted(self):
        components = [
            {
                "id": "root",
                "component": "Button",
                "child": "t",
                "action": {"event": {"name": "submit"}},
            }
        ]
        assert validate_components(components, STRICT).warnings == []

    @pytest.mark.unit
    def test_event_action_flagged_in_v08(self):
        components = [
            {
                "id": "b",
                "component": {
                    "Button": {"child": "t", "action": {"event": {"name": "go"}}}
                },
            }
        ]
        result = validate_components(components, STRICT, version=ProtocolVersion.V0_8)
        assert _codes(result.warnings) == [ValidationCode.INVALID_ACTION_SHAPE]
        assert result.warnings[0].path == (
            "surfaceUpdate.components[0].component.Button.action"
        )


class TestV08Components:
    """Tests for nested v0.8 components."""

    @pytest.mark.unit
    def test_valid_nested(self):
        components = [
            {"id": "root", "component": {"Column": {"children": {"explicitList": ["t"]}}}},
            {"id": "t", "component": {"Text": {"text": {"literalString": "Hi"}}}},
        ]
        result = validate_components(components, STRICT, version=ProtocolVersion.V0_8)
        assert result.valid
        assert result.warnings == []

    @pytest.mark.unit
    @pytest.mark.parametrize("wrapper", ["Text", {}, {"Text": {}, "Image": {}}, None])
    def test_wrapper_must_hold_one_kind(self, wrapper):
        result = validate_components(
            [{"id": "a", "component": wrapper}], version=ProtocolVersion.V0_8
        )
        assert _codes(result.errors) == [ValidationCode.MISSING_COMPONENT_TYPE]

    @pytest.mark.unit
    def test_v08_canonical_names(self):
        components = [
            {"id": "s", "component": {"Slider": {"value": {"path": "/v"}}}},
            {"id": "tabs", "component": {"Tabs": {"tabs": []}}},
        ]
        result = validate_components(components, version=ProtocolVersion.V0_8)
        assert [e.path for e in result.errors] == [
            "surfaceUpdate.components[1].component.Tabs.tabItems"
        ]

    @pytest.mark.unit
    def test_no_root_warning_in_v08(self):
        result = validate_components(
            [{"id": "a", "component": {"Divider": {}}}],
            STRICT,
            version=ProtocolVersion.V0_8,
        )
        assert result.warnings == []

    @pytest.mark.unit
    def test_unknown_nested_kind_in_strict(self):
        result = validate_components(
            [{"id": "a", "component": {"Chart": {}}}],
            STRICT,
            version=ProtocolVersion.V0_8,
        )
        assert _codes(result.warnings) == [ValidationCode.UNKNOWN_COMPONENT_TYPE]
        assert result.warnings[0].path == "surfaceUpdate.components[0].component"
