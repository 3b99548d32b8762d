"""Dynamic value algebra for A2UI component properties.

A property value is one of:
- a literal (string, number, boolean, or list of strings)
- a data binding: an object carrying a ``path`` into the surface data model
- a function call: an object carrying a ``call`` name (v0.9 only)

`is_binding` is the literal-vs-binding predicate of the validators: any
mapping with a ``path`` key counts. The `DataBinding` model follows the
stricter schema shape and rejects keys other than ``path``, so the typed
component models and the builders refuse a binding the validators accept.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FunctionReturnType(str, Enum):
    """Declared result type of a client-side function call."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    ANY = "any"
    VOID = "void"


class DataBinding(BaseModel):
    """Reference to a location in the surface data model."""

    path: str = Field(
        ...,
        description="JSON Pointer style path into the data model",
        examples=["/user/name", "items/0/title"],
    )

    model_config = ConfigDict(extra="forbid")


class FunctionCall(BaseModel):
    """Client-side function invocation used as a dynamic value."""

    call: str = Field(..., description="Name of the function to invoke")
    args: list[Any] | None = Field(
        default=None,
        description="Positional arguments (literals, bindings or nested calls)",
    )
    return_type: FunctionReturnType | None = Field(
        default=None,
        alias="returnType",
        description="Expected return type (defaults to boolean client side)",
    )

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


def is_binding(value: Any) -> bool:
    """Check whether a value is a data binding.

    A value is a binding iff it is a mapping (never a list, never None)
    containing the key ``path``. Scalars, lists and None are never bindings.

    Args:
        value: Any JSON-shaped value.

    Returns:
        bool: True for binding objects.

    Example:
        >>> is_binding({"path": "/user/name"})
        True
        >>> is_binding("hello")
        False
    """
    return isinstance(value, Mapping) and "path" in value


def literal_of(value: Any) -> Any:
    """Return the literal carried by a value, or None for a binding.

    Args:
        value: Any JSON-shaped value.

    Returns:
        The value itself unless it is a binding.
    """
    if is_binding(value):
        return None
    return value


def path_of(value: Any) -> str | None:
    """Return the bound data-model path, or None for anything else."""
    if is_binding(value):
        return value["path"]
    return None


def binding(path: str) -> dict[str, str]:
    """Build a data binding object for a data-model path."""
    return {"path": path}


def is_function_call(value: Any) -> bool:
    """Check whether a value is a function-call object (has a ``call`` key)."""
    return isinstance(value, Mapping) and "call" in value


__all__ = [
    "FunctionReturnType",
    "DataBinding",
    "FunctionCall",
    "is_binding",
    "literal_of",
    "path_of",
    "binding",
    "is_function_call",
]
