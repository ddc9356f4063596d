"""Utility class conflict resolution.

Example usage:
    >>> from pom.conflict import TailwindClassResolver
    >>> TailwindClassResolver().merge("text-left text-right")
    'text-right'
"""

from .lib import (
    ClassConflictResolver,
    TailwindClassResolver,
)

__all__ = [
    "ClassConflictResolver",
    "TailwindClassResolver",
]
