"""Unit tests for the primitive value model."""

import pytest
from pydantic import ValidationError

from a2ui.primitives import (
    DataBinding,
    FunctionCall,
    binding,
    is_binding,
    is_function_call,
    literal_of,
    path_of,
)

NON_BINDINGS = ["hello", "", 0, 42, 3.5, True, False, ["a", "b"], [], None]


class TestIsBinding:
    """Tests for the literal-vs-binding predicate."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", NON_BINDINGS)
    def test_literals_are_not_bindings(self, value):
        """Scalars, lists and None never count as bindings."""
        assert is_binding(value) is False

    @pytest.mark.unit
    def test_path_object_is_binding(self):
        assert is_binding({"path": "/user/name"}) is True

    @pytest.mark.unit
    def test_path_key_presence_is_enough(self):
        """The key decides, not the value type."""
        assert is_binding({"path": None}) is True

    @pytest.mark.unit
    def test_object_without_path(self):
        assert is_binding({"call": "now"}) is False
        assert is_binding({}) is False

    @pytest.mark.unit
    def test_list_of_path_objects_is_not_binding(self):
        assert is_binding([{"path": "/x"}]) is False


class TestExtractors:
    """Tests for literal_of and path_of."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [v for v in NON_BINDINGS if v is not None])
    def test_literal_duality(self, value):
        """Literals pass through literal_of and have no path."""
        assert literal_of(value) == value
        assert path_of(value) is None

    @pytest.mark.unit
    def test_binding_duality(self):
        """Bindings have a path and no literal."""
        value = {"path": "/settings/volume"}
        assert literal_of(value) is None
        assert path_of(value) == "/settings/volume"

    @pytest.mark.unit
    def test_none_never_raises(self):
        assert is_binding(None) is False
        assert literal_of(None) is None
        assert path_of(None) is None


class TestConstructors:
    """Tests for binding helpers and models."""

    @pytest.mark.unit
    def test_binding_helper(self):
        assert binding("/a/b") == {"path": "/a/b"}
        assert is_binding(binding("/a/b"))

    @pytest.mark.unit
    def test_is_function_call(self):
        assert is_function_call({"call": "formatDate", "args": []})
        assert not is_function_call({"path": "/x"})
        assert not is_function_call("call")

    @pytest.mark.unit
    def test_data_binding_model_rejects_extra_keys(self):
        with pytest.raises(ValidationError):
            DataBinding.model_validate({"path": "/x", "literalString": "y"})

    @pytest.mark.unit
    def test_function_call_alias(self):
        call = FunctionCall.model_validate({"call": "isEmail", "returnType": "boolean"})
        assert call.return_type == "boolean"
        dumped = call.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"call": "isEmail", "returnType": "boolean"}
