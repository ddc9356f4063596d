"""Stimulus data-attribute builders.

Example usage:
    >>> from pom.stimulus import action_attribute
    >>> action_attribute("modal", "close")
    {'data-action': 'modal#close'}
"""

from .lib import (
    ACTION_KEY,
    # Errors
    BlankIdentifier,
    InvalidStimulusAction,
    MissingStimulusController,
    # Mixin
    StimulusHelpers,
    # Builders
    action_attribute,
    class_attribute,
    controller_name,
    dasherize,
    serialize_value,
    target_attribute,
    value_attribute,
)

__all__ = [
    "ACTION_KEY",
    # Errors
    "BlankIdentifier",
    "MissingStimulusController",
    "InvalidStimulusAction",
    # Builders
    "action_attribute",
    "class_attribute",
    "controller_name",
    "dasherize",
    "serialize_value",
    "target_attribute",
    "value_attribute",
    # Mixin
    "StimulusHelpers",
]
