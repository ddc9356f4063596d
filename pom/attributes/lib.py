"""Merging of HTML attribute maps.

Attribute maps built by a base component, a subclass and the call site are
folded left to right. Later maps win per key, except:

- ``class``: old and new classes are concatenated and passed through the
  conflict resolver, so ``p-4`` followed by ``p-6`` leaves ``p-6``;
- ``data``: merged key by key, with ``controller`` and ``action`` values
  accumulated instead of replaced.

Example:
    >>> merge_options(
    ...     {"class": "p-4", "data": {"controller": "modal"}},
    ...     {"class": "p-6 shadow", "data": {"controller": "tooltip"}, "id": "x"},
    ... )
    {'class': 'p-6 shadow', 'data': {'controller': 'modal tooltip'}, 'id': 'x'}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pom.config import get_conflict_resolver
from pom.conflict import ClassConflictResolver

CLASS_KEY = "class"
DATA_KEY = "data"

# Data keys whose values accumulate across merges.
ACCUMULATING_DATA_KEYS = frozenset({"controller", "action"})


def _flatten(items: Iterable[Any]) -> Iterable[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def normalize_classes(value: Any) -> str:
    """Normalize a class value to a single string.

    Strings are stripped; lists and tuples are flattened, stringified and
    joined with empty entries dropped; anything else becomes "".
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)):
        names = (str(item) for item in _flatten(value) if item is not None)
        return " ".join(name for name in names if name).strip()
    return ""


def merge_classes(old: Any, new: Any, resolver: ClassConflictResolver | None = None) -> str:
    """Concatenate two class values and resolve utility conflicts."""
    resolver = resolver or get_conflict_resolver()
    return resolver.merge(" ".join([normalize_classes(old), normalize_classes(new)]))


def merge_data(old: Mapping[str, Any] | None, new: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge two ``data`` maps; ``controller`` and ``action`` accumulate.

    Accumulated values are the distinct non-None values, space-joined in
    order.
    """
    merged = dict(old or {})
    for key, value in (new or {}).items():
        if key in merged and str(key) in ACCUMULATING_DATA_KEYS:
            parts: list[Any] = []
            for part in (merged[key], value):
                if part is not None and part not in parts:
                    parts.append(part)
            merged[key] = " ".join(str(part) for part in parts).strip()
        else:
            merged[key] = value
    return merged


def merge_options(*maps: Mapping[str, Any] | None) -> dict[str, Any]:
    """Fold attribute maps left to right into a new map.

    None and empty maps are skipped; inputs are never modified.

    Args:
        *maps: Attribute maps, lowest precedence first.

    Returns:
        The merged attribute map.
    """
    merged: dict[str, Any] = {}
    for attributes in maps:
        if not attributes:
            continue
        for key, value in attributes.items():
            if key not in merged:
                merged[key] = value
            elif key == CLASS_KEY:
                merged[key] = merge_classes(merged[key], value)
            elif key == DATA_KEY and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
                merged[key] = merge_data(merged[key], value)
            else:
                merged[key] = value
    return merged
