"""Declarative, validated component options.

Example usage:
    >>> from pom.options import Option, Optionable
    >>> class Card(Optionable):
    ...     title = Option(required=True)
    ...     padding = Option(enums=("none", "sm", "md"), default="md")
"""

from .lib import (
    # Sentinel
    NO_DEFAULT,
    # Errors
    InvalidEnumValue,
    MissingRequiredOption,
    # DSL
    Option,
    Optionable,
    # Registry and state
    OptionRegistry,
    OptionRegistryBuilder,
    OptionSpec,
    OptionState,
    PomError,
    # Helpers
    canonical,
    is_present,
)

__all__ = [
    # Sentinel
    "NO_DEFAULT",
    # Errors
    "PomError",
    "MissingRequiredOption",
    "InvalidEnumValue",
    # Registry and state
    "OptionSpec",
    "OptionRegistry",
    "OptionRegistryBuilder",
    "OptionState",
    # DSL
    "Option",
    "Optionable",
    # Helpers
    "canonical",
    "is_present",
]
