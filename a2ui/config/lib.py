"""Centralized environment configuration management for a2ui.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Validation itself never reads the environment; options are always passed per
call. These variables only supply defaults for the CLI and other front ends.

Example:
    >>> from a2ui.config import EnvVar, get_environment
    >>>
    >>> strict = get_environment(EnvVar.A2UI_STRICT)  # Returns bool
    >>> workers = get_environment(EnvVar.A2UI_MAX_WORKERS, override=4)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from a2ui.schema import ProtocolVersion
    from a2ui.validation import ValidationOptions

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "A2UI_STRICT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by a2ui.

    Categories:
        - validation: Default validation behaviour
        - schema: JSON Schema cross-check configuration
        - runtime: Logging and batch execution
    """

    # -------------------------------------------------------------------------
    # Validation defaults
    # -------------------------------------------------------------------------
    A2UI_STRICT = EnvConfig(
        name="A2UI_STRICT",
        default=False,
        var_type=bool,
        description="Enable strict mode (unknown kind / missing root warnings)",
        category="validation",
    )
    A2UI_ALLOWED_COMPONENTS = EnvConfig(
        name="A2UI_ALLOWED_COMPONENTS",
        default=None,
        var_type=str,
        description="Comma-separated custom component kinds accepted in strict mode",
        category="validation",
    )
    A2UI_PROTOCOL_VERSION = EnvConfig(
        name="A2UI_PROTOCOL_VERSION",
        default=None,  # Inferred per message when unset
        var_type=str,
        description="Protocol version to validate against (0.8 or 0.9)",
        category="validation",
    )

    # -------------------------------------------------------------------------
    # Schema cross-check
    # -------------------------------------------------------------------------
    A2UI_SCHEMA_DIR = EnvConfig(
        name="A2UI_SCHEMA_DIR",
        default=None,  # Packaged v0.9 schemas
        var_type=Path,
        description="Directory holding the JSON Schema documents",
        category="schema",
    )

    # -------------------------------------------------------------------------
    # Runtime
    # -------------------------------------------------------------------------
    A2UI_LOG_LEVEL = EnvConfig(
        name="A2UI_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="runtime",
    )
    A2UI_MAX_WORKERS = EnvConfig(
        name="A2UI_MAX_WORKERS",
        default=1,
        var_type=int,
        description="Thread count for batch validation (1 = sequential)",
        category="runtime",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================

_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def _parse_bool(value: str) -> bool | None:
    """Read a boolean flag; None when the word is not recognized."""
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Coerce a raw environment string to ``var_type``.

    Unset or blank values, and values that fail to convert, yield ``default``.
    """
    if value is None or not value.strip():
        return default
    if var_type is bool:
        flag = _parse_bool(value)
        return default if flag is None else flag
    if var_type is int:
        try:
            return int(value.strip())
        except ValueError:
            return default
    if var_type is Path:
        return Path(value.strip()).expanduser()
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, bool, or Path).
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (validation, schema, runtime).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Convenience Functions
# =============================================================================


def get_allowed_components(override: str | None = None) -> tuple[str, ...] | None:
    """Split the comma-separated allow-list into component kinds.

    Returns None when the variable is unset or holds no names.
    """
    raw = get_environment(EnvVar.A2UI_ALLOWED_COMPONENTS, override=override)
    if not raw:
        return None
    kinds = tuple(part.strip() for part in raw.split(",") if part.strip())
    return kinds or None


def get_protocol_version(override: str | None = None) -> ProtocolVersion | None:
    """Resolve the configured protocol version.

    Raises:
        ValueError: If the configured value is not a known version.
    """
    from a2ui.schema import ProtocolVersion

    raw = get_environment(EnvVar.A2UI_PROTOCOL_VERSION, override=override)
    if not raw:
        return None
    return ProtocolVersion.parse(raw)


def get_default_validation_options(
    strict: bool | None = None,
    allowed_components: list[str] | tuple[str, ...] | None = None,
) -> ValidationOptions:
    """Build ValidationOptions from the environment, with explicit overrides."""
    from a2ui.validation import ValidationOptions

    allowed = (
        tuple(allowed_components)
        if allowed_components is not None
        else get_allowed_components()
    )
    return ValidationOptions(
        strict=get_environment(EnvVar.A2UI_STRICT, override=strict),
        allowed_components=allowed,
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
