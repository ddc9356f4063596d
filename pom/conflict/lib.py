"""Utility class conflict resolution.

Style composition concatenates class lists coming from several places (base
styles, variants, call sites). Utility classes that target the same CSS
property conflict: ``p-4 p-8`` should render as ``p-8``. This module defines
the resolver contract and the default resolver, which delegates to
``tailwind-merge``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tailwind_merge import TailwindMerge

__all__ = [
    "ClassConflictResolver",
    "TailwindClassResolver",
]


@runtime_checkable
class ClassConflictResolver(Protocol):
    """Contract for merging a space-separated utility class string."""

    def merge(self, classes: str) -> str:
        """Return ``classes`` deduplicated, keeping the last conflicting token."""
        ...


class TailwindClassResolver:
    """Default `ClassConflictResolver` backed by `tailwind_merge.TailwindMerge`.

    Args:
        merger: Preconfigured merger instance; a default one is built when
            omitted.

    Example:
        >>> TailwindClassResolver().merge("p-4 bg-blue-500 p-6 bg-red-500")
        'p-6 bg-red-500'
    """

    def __init__(self, merger: TailwindMerge | None = None) -> None:
        self._merger = merger if merger is not None else TailwindMerge()

    def merge(self, classes: str) -> str:
        """Resolve conflicts in a space-separated class string."""
        if not classes.strip():
            return ""
        return self._merger.merge(classes)
