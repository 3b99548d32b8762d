"""Primitive value model: literals, data bindings and function calls."""

from .lib import (
    DataBinding,
    FunctionCall,
    FunctionReturnType,
    binding,
    is_binding,
    is_function_call,
    literal_of,
    path_of,
)

__all__ = [
    # Models
    "DataBinding",
    "FunctionCall",
    "FunctionReturnType",
    # Predicates and extractors
    "is_binding",
    "is_function_call",
    "literal_of",
    "path_of",
    # Constructors
    "binding",
]
