"""Centralized configuration management for pom.

Provides a unified interface for environment variables with:
- Single `get_environment()` function for all environment lookups
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

On top of the environment layer sits the process-wide `Configuration`, which
is built once from the environment, read by lookups and style resolution, and
replaced wholesale through `configure()` / `reset_configuration()`.

Example:
    >>> from pom.config import EnvVar, configure, get_environment
    >>>
    >>> prefixes = get_environment(EnvVar.COMPONENT_PREFIXES)  # ["pom"]
    >>> configure(component_prefixes=["pom", "ui"])
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pom.conflict import ClassConflictResolver, TailwindClassResolver
from pom.core.log import get_logger

logger = get_logger("pom.config")

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "POM_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, list).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by pom.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - lookup: Component helper-name resolution
        - logging: Log output configuration
    """

    # -------------------------------------------------------------------------
    # Component Lookup
    # -------------------------------------------------------------------------
    COMPONENT_PREFIXES = EnvConfig(
        name="POM_COMPONENT_PREFIXES",
        default=("pom",),
        var_type=list,
        description="Comma-separated helper-name prefixes (pom_button -> ButtonComponent)",
        category="lookup",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="POM_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level used by setup_logging() in applications and tests",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _parse_list(value: str) -> list[str]:
    """Split a comma-separated string, dropping blank entries."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target type (str, int, bool, list).
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return list(default) if var_type is list and default is not None else default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is list:
        items = _parse_list(value)
        return items if items else list(default)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


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
        Value converted to the appropriate type.

    Example:
        >>> get_environment(EnvVar.COMPONENT_PREFIXES)
        ['pom']
        >>> get_environment(EnvVar.LOG_LEVEL, override="DEBUG")
        'DEBUG'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (lookup, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Process-wide Configuration
# =============================================================================


class Configuration(BaseModel):
    """Process-wide settings read during component lookup and style resolution.

    Instances are frozen; use `configure()` to install a modified copy.

    Attributes:
        component_prefixes: Recognized helper-name prefixes for lookup.
        conflict_resolver: Replacement for the default utility class
            conflict resolver (None uses the built-in one).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    component_prefixes: list[str] = Field(
        default_factory=lambda: list(EnvVar.COMPONENT_PREFIXES.value.default),
        min_length=1,
        description="Recognized helper-name prefixes",
    )
    conflict_resolver: Any = Field(
        default=None,
        description="Pluggable utility class conflict resolver",
    )

    @field_validator("component_prefixes")
    @classmethod
    def _check_prefixes(cls, value: list[str]) -> list[str]:
        cleaned = [prefix.strip() for prefix in value]
        if any(not prefix for prefix in cleaned):
            raise ValueError("component prefixes cannot be blank")
        return cleaned

    @field_validator("conflict_resolver")
    @classmethod
    def _check_resolver(cls, value: Any) -> ClassConflictResolver | None:
        if value is not None and not callable(getattr(value, "merge", None)):
            raise ValueError("conflict_resolver must provide a merge(classes) method")
        return value

    @classmethod
    def from_environment(cls) -> Configuration:
        """Build a configuration from environment variables."""
        return cls(component_prefixes=get_environment(EnvVar.COMPONENT_PREFIXES))


_configuration: Configuration | None = None


def get_configuration() -> Configuration:
    """Return the active configuration, building it from the environment once."""
    global _configuration
    if _configuration is None:
        _configuration = Configuration.from_environment()
    return _configuration


def configure(**changes: Any) -> Configuration:
    """Validate and install a configuration derived from the active one.

    Args:
        **changes: Field values to replace (component_prefixes, conflict_resolver).

    Returns:
        The newly installed configuration.

    Raises:
        pydantic.ValidationError: If a changed value is invalid.

    Example:
        >>> configure(component_prefixes=["pom", "admin"])
    """
    global _configuration
    current = get_configuration()
    fields = {
        "component_prefixes": current.component_prefixes,
        "conflict_resolver": current.conflict_resolver,
    }
    _configuration = Configuration(**{**fields, **changes})
    logger.debug("Configuration updated: %s", sorted(changes))
    return _configuration


def reset_configuration() -> Configuration:
    """Discard runtime changes and rebuild the configuration from the environment."""
    global _configuration
    _configuration = Configuration.from_environment()
    return _configuration


_default_resolver = TailwindClassResolver()


def get_conflict_resolver() -> ClassConflictResolver:
    """Return the configured conflict resolver, or the shared default one."""
    resolver = get_configuration().conflict_resolver
    return _default_resolver if resolver is None else resolver


__all__ = [
    # Environment
    "EnvConfig",
    "EnvVar",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
    # Configuration
    "Configuration",
    "configure",
    "get_configuration",
    "get_conflict_resolver",
    "reset_configuration",
]
