"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from pom.conflict import TailwindClassResolver

from .lib import (
    Configuration,
    EnvConfig,
    EnvVar,
    configure,
    get_configuration,
    get_conflict_resolver,
    get_environment,
    get_environment_info,
    list_environment_variables,
    reset_configuration,
    _convert_value,
    _parse_bool,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("POM_LOG_LEVEL", raising=False)
        assert get_environment(EnvVar.LOG_LEVEL) == "WARNING"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("POM_LOG_LEVEL", "INFO")
        assert get_environment(EnvVar.LOG_LEVEL, override="DEBUG") == "DEBUG"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("POM_LOG_LEVEL", "ERROR")
        assert get_environment(EnvVar.LOG_LEVEL) == "ERROR"

    @pytest.mark.unit
    def test_list_default_is_fresh_copy(self, monkeypatch):
        """List defaults are returned as independent lists."""
        monkeypatch.delenv("POM_COMPONENT_PREFIXES", raising=False)
        first = get_environment(EnvVar.COMPONENT_PREFIXES)
        first.append("mutated")
        assert get_environment(EnvVar.COMPONENT_PREFIXES) == ["pom"]

    @pytest.mark.unit
    def test_list_type_conversion(self, monkeypatch):
        """Comma-separated values split into a stripped list."""
        monkeypatch.setenv("POM_COMPONENT_PREFIXES", "pom, ui ,,admin")
        assert get_environment(EnvVar.COMPONENT_PREFIXES) == ["pom", "ui", "admin"]

    @pytest.mark.unit
    def test_blank_list_falls_back_to_default(self, monkeypatch):
        """A blank list value uses the default."""
        monkeypatch.setenv("POM_COMPONENT_PREFIXES", " , ")
        assert get_environment(EnvVar.COMPONENT_PREFIXES) == ["pom"]


class TestTypeConversion:
    """Tests for converting raw environment strings."""

    @pytest.mark.unit
    def test_int_type_conversion(self):
        """Integer type conversion from string."""
        result = _convert_value("8080", int, 0)
        assert result == 8080
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self):
        """Invalid integer value returns default."""
        assert _convert_value("not-a-number", int, 18000) == 18000

    @pytest.mark.unit
    def test_bool_type_conversion_true(self):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", " Yes "):
            assert _convert_value(value, bool, False) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            assert _convert_value(value, bool, True) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self):
        """Unrecognized boolean strings fall back to the default."""
        assert _parse_bool("maybe") is None
        assert _convert_value("maybe", bool, True) is True

    @pytest.mark.unit
    def test_missing_value_returns_default(self):
        """None converts to the default for every type."""
        assert _convert_value(None, int, 3) == 3
        assert _convert_value(None, bool, False) is False

    @pytest.mark.unit
    def test_unknown_type_returns_value(self):
        """Unsupported target types pass the string through."""
        assert _convert_value("1.5", float, 0.0) == "1.5"


class TestEnvironmentInfo:
    """Tests for environment variable introspection."""

    @pytest.mark.unit
    def test_get_environment_info(self):
        """Metadata is exposed for each variable."""
        info = get_environment_info(EnvVar.COMPONENT_PREFIXES)
        assert isinstance(info, EnvConfig)
        assert info.name == "POM_COMPONENT_PREFIXES"
        assert info.var_type is list
        assert info.category == "lookup"

    @pytest.mark.unit
    def test_all_variables_have_descriptions(self):
        """Every variable documents itself."""
        for var in EnvVar:
            assert var.value.description, f"{var.name} missing description"

    @pytest.mark.unit
    def test_list_by_category(self):
        """Category filter only returns matching variables."""
        assert list_environment_variables("logging") == [EnvVar.LOG_LEVEL]
        assert len(list_environment_variables()) == len(EnvVar)


# =============================================================================
# Tests for Configuration
# =============================================================================


class TestConfiguration:
    """Tests for the process-wide configuration."""

    @pytest.mark.unit
    def test_default_prefixes(self):
        """Defaults recognize the pom prefix."""
        assert get_configuration().component_prefixes == ["pom"]

    @pytest.mark.unit
    def test_configuration_reads_environment(self, monkeypatch):
        """Configuration is rebuilt from the environment on reset."""
        monkeypatch.setenv("POM_COMPONENT_PREFIXES", "ui,admin")
        config = reset_configuration()
        assert config.component_prefixes == ["ui", "admin"]

    @pytest.mark.unit
    def test_configure_replaces_active_configuration(self):
        """configure() installs a validated copy."""
        before = get_configuration()
        after = configure(component_prefixes=["pom", "admin"])

        assert get_configuration() is after
        assert after.component_prefixes == ["pom", "admin"]
        assert before.component_prefixes == ["pom"]

    @pytest.mark.unit
    def test_configuration_is_frozen(self):
        """Configuration instances cannot be mutated in place."""
        with pytest.raises(ValidationError):
            get_configuration().component_prefixes = ["other"]

    @pytest.mark.unit
    def test_blank_prefix_rejected(self):
        """Blank prefixes fail validation."""
        with pytest.raises(ValidationError, match="blank"):
            configure(component_prefixes=["pom", "  "])

    @pytest.mark.unit
    def test_empty_prefixes_rejected(self):
        """At least one prefix is required."""
        with pytest.raises(ValidationError):
            Configuration(component_prefixes=[])

    @pytest.mark.unit
    def test_reset_restores_defaults(self):
        """reset_configuration discards runtime changes."""
        configure(component_prefixes=["admin"])
        reset_configuration()
        assert get_configuration().component_prefixes == ["pom"]


class TestConflictResolverSetting:
    """Tests for the pluggable conflict resolver."""

    @pytest.mark.unit
    def test_default_resolver(self):
        """Without configuration the built-in resolver is used."""
        assert isinstance(get_conflict_resolver(), TailwindClassResolver)

    @pytest.mark.unit
    def test_custom_resolver(self):
        """A configured resolver replaces the default."""

        class Upper:
            def merge(self, classes: str) -> str:
                return classes.upper()

        configure(conflict_resolver=Upper())
        assert get_conflict_resolver().merge("p-4") == "P-4"

    @pytest.mark.unit
    def test_resolver_without_merge_rejected(self):
        """Objects without a merge method are rejected."""
        with pytest.raises(ValidationError, match="merge"):
            configure(conflict_resolver=object())
