"""Centralized configuration management for pom.

Provides unified access to environment variables via `get_environment()` and
to the process-wide `Configuration` via `get_configuration()`.

Example:
    >>> from pom.config import EnvVar, configure, get_environment
    >>>
    >>> get_environment(EnvVar.COMPONENT_PREFIXES)
    ['pom']
    >>> configure(component_prefixes=["pom", "admin"])

Environment Variable Categories:
    lookup: Helper-name prefixes recognized by component lookup
    logging: Log level for applications and the test harness
"""

from .lib import (
    # Configuration
    Configuration,
    # Core types
    EnvConfig,
    EnvVar,
    configure,
    get_configuration,
    get_conflict_resolver,
    # Main interface
    get_environment,
    get_environment_info,
    # Introspection
    list_environment_variables,
    reset_configuration,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Configuration
    "Configuration",
    "configure",
    "get_configuration",
    "get_conflict_resolver",
    "reset_configuration",
    # Introspection
    "list_environment_variables",
]
