"""Component base class.

Example usage:
    >>> from pom.component import Component
    >>> from pom.options import Option
    >>> class AlertComponent(Component):
    ...     message = Option(required=True)
"""

from .lib import Component

__all__ = ["Component"]
