"""Unit tests for typed component and action models."""

import pytest
from pydantic import ValidationError

from a2ui.components import (
    ActionShape,
    ButtonComponent,
    ChildTemplate,
    ModalComponent,
    RowComponent,
    SliderComponent,
    TabsComponent,
    TextComponent,
    classify_action,
    dump_component,
    is_action_valid_for,
    parse_component,
)
from a2ui.primitives import DataBinding
from a2ui.schema import ProtocolVersion


class TestClassifyAction:
    """Tests for action shape classification."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ({"event": {"name": "submit"}}, ActionShape.EVENT),
            ({"functionCall": {"call": "openUrl"}}, ActionShape.FUNCTION_CALL),
            ({"name": "submit"}, ActionShape.LEGACY),
            ({"name": "submit", "context": []}, ActionShape.LEGACY),
            ({}, ActionShape.UNKNOWN),
            ({"event": "submit"}, ActionShape.UNKNOWN),
            ("submit", ActionShape.UNKNOWN),
            (None, ActionShape.UNKNOWN),
        ],
    )
    def test_shapes(self, value, expected):
        assert classify_action(value) is expected

    @pytest.mark.unit
    def test_v09_rejects_bare_action(self):
        assert not is_action_valid_for({"name": "submit"}, ProtocolVersion.V0_9)
        assert is_action_valid_for({"event": {"name": "submit"}})

    @pytest.mark.unit
    def test_v08_only_accepts_bare_action(self):
        assert is_action_valid_for({"name": "submit"}, ProtocolVersion.V0_8)
        assert not is_action_valid_for(
            {"event": {"name": "submit"}}, ProtocolVersion.V0_8
        )


class TestParseComponent:
    """Tests for narrowing raw maps into typed models."""

    @pytest.mark.unit
    def test_discriminates_on_kind(self):
        comp = parse_component({"id": "t", "component": "Text", "text": "Hi"})
        assert isinstance(comp, TextComponent)
        assert comp.text == "Hi"

    @pytest.mark.unit
    def test_binding_value(self):
        comp = parse_component(
            {"id": "t", "component": "Text", "text": {"path": "/user/name"}}
        )
        assert isinstance(comp.text, DataBinding)
        assert comp.text.path == "/user/name"

    @pytest.mark.unit
    def test_extra_keys_tolerated(self):
        comp = parse_component(
            {"id": "t", "component": "Text", "text": "Hi", "x-trace": "abc"}
        )
        assert dump_component(comp)["x-trace"] == "abc"

    @pytest.mark.unit
    def test_unknown_kind_raises(self):
        with pytest.raises(ValidationError):
            parse_component({"id": "c", "component": "Chart"})

    @pytest.mark.unit
    def test_missing_required_raises(self):
        with pytest.raises(ValidationError):
            parse_component({"id": "s", "component": "Slider", "value": 3})

    @pytest.mark.unit
    def test_template_children(self):
        comp = parse_component(
            {
                "id": "list",
                "component": "Row",
                "children": {"componentId": "item", "path": "/items"},
            }
        )
        assert isinstance(comp, RowComponent)
        assert isinstance(comp.children, ChildTemplate)
        assert comp.children.component_id == "item"

    @pytest.mark.unit
    def test_legacy_tabs_mapped_to_canonical(self):
        comp = parse_component(
            {
                "id": "tabs",
                "component": "Tabs",
                "tabItems": [{"title": "One", "child": "a"}],
            }
        )
        assert isinstance(comp, TabsComponent)
        assert dump_component(comp)["tabs"] == [{"title": "One", "child": "a"}]

    @pytest.mark.unit
    def test_legacy_modal_mapped_to_canonical(self):
        comp = parse_component(
            {
                "id": "m",
                "component": "Modal",
                "entryPointChild": "open",
                "contentChild": "body",
            }
        )
        assert isinstance(comp, ModalComponent)
        assert (comp.trigger, comp.content) == ("open", "body")


class TestButtonAction:
    """Tests for the typed Button action."""

    @pytest.mark.unit
    def test_event_action(self):
        button = ButtonComponent(
            id="b", child="label", action={"event": {"name": "submit"}}
        )
        assert dump_component(button)["action"] == {"event": {"name": "submit"}}

    @pytest.mark.unit
    def test_function_call_action_alias(self):
        button = ButtonComponent.model_validate(
            {
                "id": "b",
                "component": "Button",
                "child": "label",
                "action": {"functionCall": {"call": "openUrl", "args": ["x"]}},
            }
        )
        dumped = dump_component(button)
        assert dumped["action"] == {"functionCall": {"call": "openUrl", "args": ["x"]}}

    @pytest.mark.unit
    def test_bare_action_rejected(self):
        with pytest.raises(ValidationError):
            ButtonComponent(id="b", child="label", action={"name": "submit"})


class TestDump:
    """Tests for wire serialization."""

    @pytest.mark.unit
    def test_drops_none_and_keeps_kind(self):
        dumped = dump_component(TextComponent(id="t", text="Hi"))
        assert dumped == {"id": "t", "component": "Text", "text": "Hi"}

    @pytest.mark.unit
    def test_enum_values_serialized(self):
        dumped = dump_component(TextComponent(id="t", text="Hi", variant="h1"))
        assert dumped["variant"] == "h1"

    @pytest.mark.unit
    def test_slider_keeps_integers(self):
        dumped = dump_component(SliderComponent(id="s", value=5, min=0, max=10))
        assert dumped == {
            "id": "s",
            "component": "Slider",
            "value": 5,
            "min": 0,
            "max": 10,
        }
