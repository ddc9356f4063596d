"""Style groups, inheritance merging and class string resolution.

Example usage:
    >>> from pom.styles import Styleable, Styles
    >>> class Badge(Styleable):
    ...     styles = Styles(base="rounded px-2", tone={"info": "bg-blue-100"})
    >>> Badge().styles_for(tone="info")
    'rounded px-2 bg-blue-100'
"""

from .lib import (
    BASE_KEY,
    DEFAULT_GROUP,
    # Registry and resolution
    StyleRegistry,
    StyleResolver,
    # DSL
    Styleable,
    Styles,
    merge_style_maps,
    resolve_rule,
    select_variant,
)

__all__ = [
    "BASE_KEY",
    "DEFAULT_GROUP",
    # Registry and resolution
    "StyleRegistry",
    "StyleResolver",
    "merge_style_maps",
    "resolve_rule",
    "select_variant",
    # DSL
    "Styleable",
    "Styles",
]
