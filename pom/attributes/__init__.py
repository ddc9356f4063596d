"""Attribute map merging.

Example usage:
    >>> from pom.attributes import merge_options
    >>> merge_options({"class": "text-left"}, {"class": "text-right"})
    {'class': 'text-right'}
"""

from .lib import (
    ACCUMULATING_DATA_KEYS,
    merge_classes,
    merge_data,
    merge_options,
    normalize_classes,
)

__all__ = [
    "ACCUMULATING_DATA_KEYS",
    "merge_classes",
    "merge_data",
    "merge_options",
    "normalize_classes",
]
