"""Unit tests for component, message and data-model builders."""

import threading

import pytest
from pydantic import ValidationError

from a2ui.builders import (
    IdGenerator,
    audio_player,
    body,
    button,
    caption,
    card,
    checkbox,
    choice_picker,
    column,
    create_messages,
    create_surface,
    date_time_input,
    deep_merge,
    delete_surface,
    divider,
    event_action,
    flatten_object_to_value_map,
    function_call_action,
    h1,
    h3,
    icon,
    image,
    list_,
    modal,
    normalize_path,
    object_to_value_map,
    row,
    slider,
    tabs,
    text,
    text_button,
    text_field,
    update_components,
    update_data_model,
    updates_to_value_map,
    value_map_to_object,
    value_to_value_map,
    video,
)
from a2ui.conformance import validate_messages_with_schema, validate_with_schema
from a2ui.messages import STANDARD_CATALOG_ID
from a2ui.primitives import binding, is_binding
from a2ui.validation import ValidationOptions, validate_components, validate_messages

STRICT = ValidationOptions(strict=True)


def _every_kind(ids: IdGenerator) -> list[dict]:
    """One instance of each of the 18 standard kinds under a root column."""
    title = h1("Title", ids=ids)
    label, submit = text_button("Submit", event_action("submit"), ids=ids)
    parts = [
        title,
        label,
        submit,
        image("https://example.com/a.png", fit="cover", ids=ids),
        icon("home", ids=ids),
        video("https://example.com/a.mp4", ids=ids),
        audio_player("https://example.com/a.mp3", description="Intro", ids=ids),
        row([title["id"]], justify="center", ids=ids),
        list_({"componentId": title["id"], "path": "/items"}, ids=ids),
        card(title["id"], ids=ids),
        tabs([("One", title["id"])], ids=ids),
        divider(axis="horizontal", ids=ids),
        modal(submit["id"], title["id"], ids=ids),
        checkbox("Agree", binding("/form/agree"), ids=ids),
        text_field("Name", binding("/form/name"), variant="shortText", ids=ids),
        date_time_input(binding("/form/date"), enable_date=True, ids=ids),
        choice_picker([("Red", "r"), ("Blue", "b")], ["r"], ids=ids),
        slider(binding("/form/volume"), ids=ids),
    ]
    root = column([p["id"] for p in parts], id="root")
    return [root, *parts]


class TestIdGenerator:
    """Tests for injected ID generation."""

    @pytest.mark.unit
    def test_sequential_ids(self):
        ids = IdGenerator()
        assert ids.next("text") == "text_1"
        assert ids.next("button") == "button_2"
        assert ids.value == 2

    @pytest.mark.unit
    def test_reset_returns_to_start(self):
        ids = IdGenerator(prefix_separator="-", start=10)
        ids.next("a")
        ids.reset()
        assert ids.value == 10
        assert ids.next("a") == "a-11"

    @pytest.mark.unit
    def test_generators_are_independent(self):
        first, second = IdGenerator(), IdGenerator()
        first.next("x")
        assert second.next("x") == "x_1"

    @pytest.mark.unit
    def test_thread_safe(self):
        ids = IdGenerator()
        produced: list[str] = []
        lock = threading.Lock()

        def worker():
            local = [ids.next("c") for _ in range(200)]
            with lock:
                produced.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(produced)) == 1000
        assert ids.value == 1000

    @pytest.mark.unit
    def test_random_fallback(self):
        first, second = text("a"), text("b")
        assert first["id"].startswith("text_")
        assert first["id"] != second["id"]

    @pytest.mark.unit
    def test_explicit_id_wins(self):
        ids = IdGenerator()
        assert text("a", id="greeting", ids=ids)["id"] == "greeting"
        assert ids.value == 0


class TestComponentBuilders:
    """Tests for component builder output."""

    @pytest.mark.unit
    def test_text_wire_form(self):
        assert text("Hi", id="t") == {"id": "t", "component": "Text", "text": "Hi"}

    @pytest.mark.unit
    def test_typography_shortcuts(self):
        assert h3("x", id="a")["variant"] == "h3"
        assert caption("x", id="b")["variant"] == "caption"
        assert body("x", id="c")["variant"] == "body"

    @pytest.mark.unit
    def test_binding_value(self):
        component = text(binding("/user/name"), id="t")
        assert component["text"] == {"path": "/user/name"}

    @pytest.mark.unit
    def test_tabs_use_canonical_name(self):
        component = tabs([("A", "a"), {"title": "B", "child": "b"}], id="tabs")
        assert "tabItems" not in component
        assert component["tabs"] == [
            {"title": "A", "child": "a"},
            {"title": "B", "child": "b"},
        ]

    @pytest.mark.unit
    def test_modal_uses_canonical_names(self):
        component = modal("open", "dialog", id="m")
        assert component["trigger"] == "open"
        assert component["content"] == "dialog"
        assert "entryPointChild" not in component

    @pytest.mark.unit
    def test_slider_defaults(self):
        component = slider(5, id="s")
        assert (component["min"], component["max"]) == (0, 100)

    @pytest.mark.unit
    def test_date_time_camel_case(self):
        component = date_time_input("2025-01-01", enable_time=False, id="d")
        assert component["enableTime"] is False
        assert "enableDate" not in component

    @pytest.mark.unit
    def test_extra_props_pass_through(self):
        component = text("x", id="t", weight=2, accessibility={"label": "X"})
        assert component["weight"] == 2
        assert component["accessibility"] == {"label": "X"}

    @pytest.mark.unit
    def test_text_button_pair(self):
        label, btn = text_button("Go", event_action("go", {"id": 1}), id="go")
        assert btn["child"] == label["id"] == "go_label"
        assert btn["action"] == {"event": {"name": "go", "context": {"id": 1}}}

    @pytest.mark.unit
    def test_function_call_action(self):
        btn = button("label", function_call_action("openUrl", ["https://x"]), id="b")
        assert btn["action"] == {
            "functionCall": {"call": "openUrl", "args": ["https://x"]}
        }

    @pytest.mark.unit
    def test_legacy_action_rejected(self):
        """A bare v0.8 action is not accepted by the v0.9 button."""
        with pytest.raises(ValidationError):
            button("label", {"name": "submit"}, id="b")

    @pytest.mark.unit
    def test_missing_required_rejected(self):
        with pytest.raises(ValidationError):
            text(None, id="t")

    @pytest.mark.unit
    def test_bad_enum_rejected(self):
        with pytest.raises(ValidationError):
            row(["a"], justify="sideways", id="r")


class TestBuilderOutputValidates:
    """Builder output passes both validators."""

    @pytest.mark.unit
    def test_strict_component_validation(self):
        result = validate_components(_every_kind(IdGenerator()), STRICT)
        assert result.valid
        assert result.warnings == []

    @pytest.mark.unit
    def test_schema_cross_check(self):
        message = update_components("s1", _every_kind(IdGenerator()))
        result = validate_with_schema(message)
        assert result.valid, result.errors

    @pytest.mark.unit
    def test_full_message_sequence(self):
        messages = create_messages(
            "s1",
            _every_kind(IdGenerator()),
            data_model={"form": {"name": "Ada"}},
            theme={"primaryColor": "#00BFFF"},
            send_data_model=True,
        )
        assert validate_messages(messages, STRICT).valid
        assert validate_messages_with_schema(messages).valid

    @pytest.mark.unit
    def test_binding_with_extra_keys(self):
        """The validators accept extra binding keys; the typed builders do not."""
        value = {"path": "/user/name", "note": "x"}
        assert is_binding(value)
        components = [{"id": "root", "component": "Text", "text": value}]
        assert validate_components(components, STRICT).valid
        with pytest.raises(ValidationError):
            text(value, id="t")


class TestMessageBuilders:
    """Tests for message builders."""

    @pytest.mark.unit
    def test_create_surface_defaults(self):
        assert create_surface("s1") == {
            "createSurface": {"surfaceId": "s1", "catalogId": STANDARD_CATALOG_ID}
        }

    @pytest.mark.unit
    def test_create_surface_theme(self):
        message = create_surface("s1", theme={"primaryColor": "#112233", "radius": "4"})
        assert message["createSurface"]["theme"] == {
            "primaryColor": "#112233",
            "radius": "4",
        }

    @pytest.mark.unit
    def test_create_surface_bad_color(self):
        with pytest.raises(ValidationError):
            create_surface("s1", theme={"primaryColor": "blue"})

    @pytest.mark.unit
    def test_empty_surface_id_rejected(self):
        with pytest.raises(ValidationError):
            delete_surface("")

    @pytest.mark.unit
    def test_update_data_model_remove_has_no_value(self):
        message = update_data_model("s1", path="/cart/0", op="remove")
        assert message == {
            "updateDataModel": {"surfaceId": "s1", "path": "/cart/0", "op": "remove"}
        }

    @pytest.mark.unit
    def test_update_data_model_keeps_null(self):
        message = update_data_model("s1", None, path="/note", op="replace")
        assert message["updateDataModel"]["value"] is None

    @pytest.mark.unit
    def test_update_data_model_bad_op(self):
        with pytest.raises(ValidationError):
            update_data_model("s1", 1, op="merge")

    @pytest.mark.unit
    def test_create_messages_order(self):
        without = create_messages("s1", [text("x", id="root")])
        with_data = create_messages("s1", [text("x", id="root")], data_model={})
        assert [next(iter(m)) for m in without] == ["createSurface", "updateComponents"]
        assert [next(iter(m)) for m in with_data][-1] == "updateDataModel"
        assert with_data[-1]["updateDataModel"]["value"] == {}


class TestDataModelHelpers:
    """Tests for v0.8 ValueMap conversions."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("a", {"valueString": "a"}),
            (3, {"valueNumber": 3}),
            (1.5, {"valueNumber": 1.5}),
            (True, {"valueBoolean": True}),
            (None, {"valueString": ""}),
        ],
    )
    def test_scalars(self, value, expected):
        assert value_to_value_map("/k", value) == {"key": "/k", **expected}

    @pytest.mark.unit
    def test_nested_values(self):
        entry = value_to_value_map("/user", {"tags": ["x"], "active": False})
        assert entry == {
            "key": "/user",
            "valueMap": [
                {"key": "tags", "valueMap": [{"key": "0", "valueString": "x"}]},
                {"key": "active", "valueBoolean": False},
            ],
        }

    @pytest.mark.unit
    def test_object_to_value_map(self):
        entries = object_to_value_map({"a": 1, "b": "x"})
        assert [e["key"] for e in entries] == ["/a", "/b"]

    @pytest.mark.unit
    def test_flatten(self):
        entries = flatten_object_to_value_map({"user": {"name": "Ada", "age": 36}}, "")
        assert entries == [
            {"key": "/user/name", "valueString": "Ada"},
            {"key": "/user/age", "valueNumber": 36},
        ]

    @pytest.mark.unit
    def test_value_map_to_object(self):
        entries = [
            {"key": "/name", "valueString": "Ada"},
            {"key": "flags", "valueMap": [{"key": "on", "valueBoolean": True}]},
            {"key": "/empty"},
        ]
        assert value_map_to_object(entries) == {"name": "Ada", "flags": {"on": True}}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("user.name", "/user/name"),
            ("/user/name", "/user/name"),
            ("form", "/booking"),
            ("form.date", "/booking/date"),
            ("formal.date", "/formal/date"),
        ],
    )
    def test_normalize_path(self, path, expected):
        assert normalize_path(path, {"form": "booking"}) == expected

    @pytest.mark.unit
    def test_updates_to_value_map(self):
        entries = updates_to_value_map(
            [
                {"path": "name", "value": "Ada"},
                {"path": "/address", "value": {"city": "London"}},
            ],
            base_path="/user",
        )
        assert entries == [
            {"key": "/user/name", "valueString": "Ada"},
            {"key": "/address/city", "valueString": "London"},
        ]

    @pytest.mark.unit
    def test_deep_merge_nested(self):
        target = {"user": {"name": "Ada", "age": 36}, "theme": "dark"}
        merged = deep_merge(target, {"user": {"age": 37, "city": "London"}})
        assert merged == {
            "user": {"name": "Ada", "age": 37, "city": "London"},
            "theme": "dark",
        }
        assert target == {"user": {"name": "Ada", "age": 36}, "theme": "dark"}

    @pytest.mark.unit
    def test_deep_merge_replaces_lists_and_scalars(self):
        merged = deep_merge(
            {"tags": ["a", "b"], "user": {"name": "Ada"}},
            {"tags": ["c"], "user": "anonymous"},
        )
        assert merged == {"tags": ["c"], "user": "anonymous"}

    @pytest.mark.unit
    def test_deep_merge_skips_none(self):
        merged = deep_merge({"name": "Ada", "age": 36}, {"name": None, "age": 0})
        assert merged == {"name": "Ada", "age": 0}
