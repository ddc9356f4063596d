"""Helper-name based component lookup.

Example usage:
    >>> from pom.lookup import default_lookup
    >>> default_lookup.class_name_for("pom_user_profile_card")
    'UserProfileCardComponent'
"""

from .lib import (
    COMPONENT_SUFFIX,
    # Registry
    ComponentLookup,
    # Protocols
    Renderer,
    # Errors
    UndefinedComponentType,
    camelize,
    default_lookup,
)

__all__ = [
    "COMPONENT_SUFFIX",
    # Errors
    "UndefinedComponentType",
    # Protocols
    "Renderer",
    # Registry
    "ComponentLookup",
    "camelize",
    "default_lookup",
]
