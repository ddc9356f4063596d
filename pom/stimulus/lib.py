"""Stimulus data-attribute builders.

Each builder returns a one-entry attribute map ready to be merged into a
component's HTML attributes:

    >>> value_attribute("dropdown", "max_items", 10)
    {'data-dropdown-max-items-value': 10}
    >>> action_attribute("dropdown", {"click": "toggle"})
    {'data-action': 'click->dropdown#toggle'}

`StimulusHelpers` exposes the same builders as methods that default the
controller to the object's ``stimulus`` attribute.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pom.options import PomError, canonical

ACTION_KEY = "data-action"

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


# =============================================================================
# Errors
# =============================================================================


class BlankIdentifier(PomError, ValueError):
    """Raised when an attribute name is empty or whitespace only."""

    def __init__(self, message: str = "Name cannot be blank"):
        super().__init__(message)


class MissingStimulusController(PomError, ValueError):
    """Raised when no usable Stimulus controller name is available."""


class InvalidStimulusAction(PomError, ValueError):
    """Raised for malformed Stimulus action definitions."""


# =============================================================================
# Naming
# =============================================================================


def dasherize(value: Any) -> str:
    """Convert ``DropdownMenu`` / ``dropdown_menu`` style names to ``dropdown-menu``."""
    text = str(canonical(value)).strip()
    return _WORD_BOUNDARY.sub("_", text).lower().replace("_", "-")


def _checked_name(name: Any) -> str:
    if name is None or not str(canonical(name)).strip():
        raise BlankIdentifier()
    return dasherize(name)


def controller_name(stimulus: Any) -> str:
    """Dasherized controller name.

    Raises:
        MissingStimulusController: If ``stimulus`` is None or blank.
    """
    if stimulus is None:
        raise MissingStimulusController(
            "No Stimulus controller available. Pass stimulus= explicitly or set a stimulus controller."
        )
    if not str(canonical(stimulus)).strip():
        raise MissingStimulusController("Stimulus controller cannot be blank")
    return dasherize(stimulus)


# =============================================================================
# Builders
# =============================================================================


def serialize_value(value: Any) -> Any:
    """Lists and mappings become compact JSON; other values pass through."""
    if isinstance(value, (list, tuple, Mapping)):
        return json.dumps(value if not isinstance(value, tuple) else list(value), separators=(",", ":"))
    return value


def value_attribute(controller: Any, name: Any, value: Any) -> dict[str, Any]:
    """``data-<controller>-<name>-value`` attribute."""
    key = f"data-{controller_name(controller)}-{_checked_name(name)}-value"
    return {key: serialize_value(value)}


def target_attribute(controller: Any, names: Any) -> dict[str, str]:
    """``data-<controller>-target`` attribute for one or several targets."""
    if isinstance(names, (str, Enum)) or not isinstance(names, Iterable):
        names = [names]
    names = [str(canonical(name)) for name in names if name is not None]
    if not names or any(not name.strip() for name in names):
        raise BlankIdentifier()
    return {f"data-{controller_name(controller)}-target": " ".join(names)}


def class_attribute(controller: Any, name: Any, value: Any) -> dict[str, Any]:
    """``data-<controller>-<name>-class`` attribute."""
    return {f"data-{controller_name(controller)}-{_checked_name(name)}-class": value}


def action_attribute(controller: Any, action: Any) -> dict[str, str]:
    """``data-action`` attribute.

    Args:
        controller: Controller name.
        action: Mapping of event to method (``{"click": "toggle"}``) or a
            single method name.

    Raises:
        InvalidStimulusAction: If a method name already names a controller
            (contains ``->``) or the action has an unsupported type.
    """
    ctrl = controller_name(controller)

    if isinstance(action, Mapping):
        if not action:
            return {ACTION_KEY: ""}
        descriptors = [f"{canonical(event)}->{ctrl}#{canonical(method)}" for event, method in action.items()]
        return {ACTION_KEY: " ".join(descriptors)}

    if isinstance(action, (str, Enum)):
        method = str(canonical(action))
        if "->" in method:
            raise InvalidStimulusAction(
                "Do not include controller name manually. Pass stimulus= or set the stimulus controller."
            )
        return {ACTION_KEY: f"{ctrl}#{method}"}

    raise InvalidStimulusAction("Invalid format for stimulus_action: must be a mapping, enum or string")


# =============================================================================
# Mixin
# =============================================================================


class StimulusHelpers:
    """Builders bound to the object's ``stimulus`` controller.

    Example:
        >>> class Dropdown(StimulusHelpers):
        ...     stimulus = "dropdown"
        >>> Dropdown().stimulus_target(["menu", "button"])
        {'data-dropdown-target': 'menu button'}
    """

    stimulus: Any = None

    def _controller(self, stimulus: Any) -> Any:
        return stimulus if stimulus is not None else getattr(self, "stimulus", None)

    def stimulus_controller(self) -> str:
        return controller_name(getattr(self, "stimulus", None))

    def stimulus_value(self, name: Any, value: Any, stimulus: Any = None) -> dict[str, Any]:
        return value_attribute(self._controller(stimulus), name, value)

    def stimulus_target(self, names: Any, stimulus: Any = None) -> dict[str, str]:
        return target_attribute(self._controller(stimulus), names)

    def stimulus_class(self, name: Any, value: Any, stimulus: Any = None) -> dict[str, Any]:
        return class_attribute(self._controller(stimulus), name, value)

    def stimulus_action(self, action: Any, stimulus: Any = None) -> dict[str, str]:
        return action_attribute(self._controller(stimulus), action)
