"""Tests for configuration management."""

from pathlib import Path

import pytest

from a2ui.schema import ProtocolVersion

from .lib import (
    EnvConfig,
    EnvVar,
    get_allowed_components,
    get_default_validation_options,
    get_environment,
    get_environment_info,
    get_protocol_version,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("A2UI_MAX_WORKERS", raising=False)
        assert get_environment(EnvVar.A2UI_MAX_WORKERS) == 1

    @pytest.mark.unit
    def test_blank_value_returns_default(self, monkeypatch):
        """A set-but-blank variable behaves as unset."""
        monkeypatch.setenv("A2UI_LOG_LEVEL", "  ")
        monkeypatch.setenv("A2UI_STRICT", "")
        assert get_environment(EnvVar.A2UI_LOG_LEVEL) == "INFO"
        assert get_environment(EnvVar.A2UI_STRICT) is False

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("A2UI_MAX_WORKERS", "8")
        assert get_environment(EnvVar.A2UI_MAX_WORKERS, override=2) == 2

    @pytest.mark.unit
    def test_false_override_is_honoured(self, monkeypatch):
        """A False override is not mistaken for a missing override."""
        monkeypatch.setenv("A2UI_STRICT", "true")
        assert get_environment(EnvVar.A2UI_STRICT, override=False) is False

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("A2UI_MAX_WORKERS", "4")
        result = get_environment(EnvVar.A2UI_MAX_WORKERS)
        assert result == 4
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("A2UI_MAX_WORKERS", "lots")
        assert get_environment(EnvVar.A2UI_MAX_WORKERS) == 1

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean type conversion for true and false spellings."""
        for value in ("true", "1", "yes", "TRUE"):
            monkeypatch.setenv("A2UI_STRICT", value)
            assert get_environment(EnvVar.A2UI_STRICT) is True
        for value in ("false", "0", "no", "No"):
            monkeypatch.setenv("A2UI_STRICT", value)
            assert get_environment(EnvVar.A2UI_STRICT) is False

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables come back as Path objects."""
        monkeypatch.setenv("A2UI_SCHEMA_DIR", str(tmp_path))
        result = get_environment(EnvVar.A2UI_SCHEMA_DIR)
        assert isinstance(result, Path)
        assert result == tmp_path


class TestIntrospection:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        info = get_environment_info(EnvVar.A2UI_STRICT)
        assert isinstance(info, EnvConfig)
        assert info.name == "A2UI_STRICT"
        assert info.default is False
        assert info.var_type is bool
        assert info.category == "validation"

    @pytest.mark.unit
    def test_list_all(self):
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_list_by_category(self):
        runtime = list_environment_variables("runtime")
        assert EnvVar.A2UI_LOG_LEVEL in runtime
        assert EnvVar.A2UI_STRICT not in runtime


class TestValidationDefaults:
    """Tests for helpers that feed ValidationOptions."""

    @pytest.mark.unit
    def test_allowed_components_split(self, monkeypatch):
        monkeypatch.setenv("A2UI_ALLOWED_COMPONENTS", "Chart, Map ,,")
        assert get_allowed_components() == ("Chart", "Map")

    @pytest.mark.unit
    def test_allowed_components_unset(self, monkeypatch):
        monkeypatch.delenv("A2UI_ALLOWED_COMPONENTS", raising=False)
        assert get_allowed_components() is None

    @pytest.mark.unit
    def test_protocol_version(self, monkeypatch):
        monkeypatch.setenv("A2UI_PROTOCOL_VERSION", "v0.8")
        assert get_protocol_version() is ProtocolVersion.V0_8

    @pytest.mark.unit
    def test_protocol_version_rejects_unknown(self, monkeypatch):
        monkeypatch.setenv("A2UI_PROTOCOL_VERSION", "2.0")
        with pytest.raises(ValueError):
            get_protocol_version()

    @pytest.mark.unit
    def test_default_validation_options(self, monkeypatch):
        monkeypatch.setenv("A2UI_STRICT", "yes")
        monkeypatch.setenv("A2UI_ALLOWED_COMPONENTS", "Chart")
        options = get_default_validation_options()
        assert options.strict is True
        assert options.allowed_components == ("Chart",)

    @pytest.mark.unit
    def test_default_validation_options_overrides(self, monkeypatch):
        monkeypatch.setenv("A2UI_STRICT", "yes")
        options = get_default_validation_options(
            strict=False, allowed_components=["Map"]
        )
        assert options.strict is False
        assert options.allowed_components == ("Map",)
