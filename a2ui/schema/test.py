"""Unit tests for the Schema module."""

import pytest

from a2ui.schema import (
    COMPONENT_REGISTRY,
    ComponentCategory,
    ComponentType,
    PropertyRequirement,
    ProtocolVersion,
    export_catalog_summary,
    get_component_meta,
    get_components_by_category,
    get_requirements,
    is_standard_kind,
    required_fields_for,
    resolve_component_type,
)

REQUIRED_TABLE = {
    "Text": ["text"],
    "Image": ["url"],
    "Icon": ["name"],
    "Video": ["url"],
    "AudioPlayer": ["url"],
    "Row": ["children"],
    "Column": ["children"],
    "List": ["children"],
    "Card": ["child"],
    "Tabs": ["tabs"],
    "Divider": [],
    "Modal": ["trigger", "content"],
    "Button": ["child", "action"],
    "CheckBox": ["label", "value"],
    "TextField": ["label"],
    "DateTimeInput": ["value"],
    "ChoicePicker": ["options", "value"],
    "Slider": ["value", "min", "max"],
}


class TestComponentRegistry:
    """Tests for COMPONENT_REGISTRY completeness."""

    @pytest.mark.unit
    def test_all_component_types_registered(self):
        """Every ComponentType has metadata in registry."""
        for ct in ComponentType:
            assert ct in COMPONENT_REGISTRY, f"Missing metadata for {ct}"

    @pytest.mark.unit
    def test_registry_has_18_entries(self):
        assert len(COMPONENT_REGISTRY) == 18

    @pytest.mark.unit
    def test_all_entries_have_descriptions(self):
        for ct, meta in COMPONENT_REGISTRY.items():
            assert meta.description, f"{ct} missing description"
            assert meta.type is ct

    @pytest.mark.unit
    def test_meta_to_dict(self):
        d = get_component_meta(ComponentType.MODAL).to_dict()
        assert d["type"] == "Modal"
        assert d["category"] == "layout"
        assert d["required"] == ["trigger", "content"]
        assert d["legacy_required"] == ["entryPointChild", "contentChild"]


class TestRequiredFields:
    """Tests for the required-property table."""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind,expected", sorted(REQUIRED_TABLE.items()))
    def test_v09_table(self, kind, expected):
        """Required fields match the published table exactly."""
        assert required_fields_for(kind) == expected

    @pytest.mark.unit
    def test_v08_uses_legacy_names(self):
        assert required_fields_for("Tabs", ProtocolVersion.V0_8) == ["tabItems"]
        assert required_fields_for("Modal", ProtocolVersion.V0_8) == [
            "entryPointChild",
            "contentChild",
        ]
        assert required_fields_for("Slider", ProtocolVersion.V0_8) == ["value"]
        assert required_fields_for("Button", ProtocolVersion.V0_8) == [
            "child",
            "action",
        ]

    @pytest.mark.unit
    def test_unknown_kind_requires_nothing(self):
        assert required_fields_for("Chart") == []
        assert get_requirements(None) == ()

    @pytest.mark.unit
    def test_legacy_alias_satisfies_requirement(self):
        (tabs_req,) = get_requirements("Tabs")
        assert tabs_req.is_satisfied_by({"tabs": []})
        assert tabs_req.is_satisfied_by({"tabItems": []})
        assert not tabs_req.is_satisfied_by({"tab": []})

    @pytest.mark.unit
    def test_presence_not_truthiness(self):
        req = PropertyRequirement("value")
        assert req.is_satisfied_by({"value": None})
        assert req.is_satisfied_by({"value": 0})
        assert not req.is_satisfied_by({})


class TestKindLookup:
    """Tests for kind resolution."""

    @pytest.mark.unit
    def test_standard_kinds(self):
        for ct in ComponentType:
            assert is_standard_kind(ct.value)

    @pytest.mark.unit
    def test_lookup_is_case_sensitive(self):
        assert not is_standard_kind("text")
        assert not is_standard_kind("CHECKBOX")

    @pytest.mark.unit
    def test_non_string_kinds(self):
        assert resolve_component_type(None) is None
        assert resolve_component_type(7) is None
        assert resolve_component_type({"Text": {}}) is None

    @pytest.mark.unit
    def test_resolve_enum_member(self):
        assert resolve_component_type(ComponentType.CARD) is ComponentType.CARD


class TestCategories:
    """Tests for category lookup."""

    @pytest.mark.unit
    def test_every_category_populated(self):
        for cat in ComponentCategory:
            assert get_components_by_category(cat)

    @pytest.mark.unit
    def test_interactive_members(self):
        interactive = get_components_by_category(ComponentCategory.INTERACTIVE)
        assert ComponentType.BUTTON in interactive
        assert ComponentType.ROW not in interactive


class TestProtocolVersion:
    """Tests for version parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0.9", "v0.9", "V0_9", " 0.9 "])
    def test_parse_spellings(self, raw):
        assert ProtocolVersion.parse(raw) is ProtocolVersion.V0_9

    @pytest.mark.unit
    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown protocol version"):
            ProtocolVersion.parse("1.0")


class TestCatalogExport:
    """Tests for export_catalog_summary."""

    @pytest.mark.unit
    def test_summary_shape(self):
        summary = export_catalog_summary()
        assert set(summary["components"]) == set(REQUIRED_TABLE)
        assert summary["components"]["Slider"]["required"] == ["value", "min", "max"]
        assert "0.8" in summary["protocol_versions"]
        assert "Button" in summary["categories"]["interactive"]
