"""Centralized configuration management for a2ui.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from a2ui.config import EnvVar, get_environment
    >>>
    >>> strict = get_environment(EnvVar.A2UI_STRICT)  # Returns bool: False
    >>> options = get_default_validation_options()

Environment Variable Categories:
    validation: Default strict mode, allow-list and protocol version
    schema: Location of the JSON Schema documents
    runtime: Log level and batch worker count
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_allowed_components,
    get_default_validation_options,
    get_environment,
    get_environment_info,
    get_protocol_version,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_allowed_components",
    "get_protocol_version",
    "get_default_validation_options",
    # Introspection
    "list_environment_variables",
]
