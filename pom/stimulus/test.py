"""Unit tests for Stimulus attribute builders."""

from enum import Enum

import pytest

from .lib import (
    BlankIdentifier,
    InvalidStimulusAction,
    MissingStimulusController,
    StimulusHelpers,
    action_attribute,
    dasherize,
    target_attribute,
    value_attribute,
)


class Dropdown(StimulusHelpers):
    stimulus = "dropdown"


class DropdownMenu(StimulusHelpers):
    stimulus = "DropdownMenu"


class Unbound(StimulusHelpers):
    pass


class Event(Enum):
    TOGGLE = "toggle"


class TestDasherize:
    """Tests for name conversion."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("max_items", "max-items"),
            ("DropdownMenu", "dropdown-menu"),
            ("dropdown_menu", "dropdown-menu"),
            ("dropdown-menu", "dropdown-menu"),
            ("HTMLParser", "html-parser"),
            ("open", "open"),
        ],
    )
    def test_dasherize(self, raw, expected):
        """Camel case and underscores become dashes."""
        assert dasherize(raw) == expected


class TestStimulusValue:
    """Tests for value attributes."""

    @pytest.mark.unit
    def test_boolean_value(self):
        """Scalar values are kept as is."""
        assert Dropdown().stimulus_value("open", True) == {"data-dropdown-open-value": True}

    @pytest.mark.unit
    def test_multi_word_name(self):
        """Names are dasherized."""
        assert Dropdown().stimulus_value("max_items", 10) == {"data-dropdown-max-items-value": 10}

    @pytest.mark.unit
    def test_controller_dasherized(self):
        """The controller name is dasherized."""
        assert DropdownMenu().stimulus_value("open", True) == {"data-dropdown-menu-open-value": True}

    @pytest.mark.unit
    def test_explicit_controller(self):
        """An explicit controller overrides the default."""
        assert Dropdown().stimulus_value("open", True, stimulus="modal") == {"data-modal-open-value": True}

    @pytest.mark.unit
    def test_complex_values_json_encoded(self):
        """Lists and mappings become compact JSON."""
        assert value_attribute("chart", "points", [1, 2]) == {"data-chart-points-value": "[1,2]"}
        assert value_attribute("chart", "options", {"a": 1}) == {"data-chart-options-value": '{"a":1}'}

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        """Blank names are rejected."""
        with pytest.raises(BlankIdentifier, match="^Name cannot be blank$"):
            Dropdown().stimulus_value(name, True)


class TestStimulusTarget:
    """Tests for target attributes."""

    @pytest.mark.unit
    def test_single_target(self):
        """A single target name."""
        assert Dropdown().stimulus_target("menu") == {"data-dropdown-target": "menu"}

    @pytest.mark.unit
    def test_multiple_targets(self):
        """Several targets are space-joined."""
        assert Dropdown().stimulus_target(["menu", "button"]) == {"data-dropdown-target": "menu button"}

    @pytest.mark.unit
    def test_explicit_controller(self):
        """An explicit controller overrides the default."""
        assert target_attribute("modal", "menu") == {"data-modal-target": "menu"}

    @pytest.mark.unit
    @pytest.mark.parametrize("names", ["", [], ["menu", " "]])
    def test_blank_target(self, names):
        """Blank or missing target names are rejected."""
        with pytest.raises(BlankIdentifier):
            Dropdown().stimulus_target(names)


class TestStimulusClass:
    """Tests for class attributes."""

    @pytest.mark.unit
    def test_class_attribute(self):
        """Name and controller are dasherized."""
        assert DropdownMenu().stimulus_class("open", "bg-blue-500") == {"data-dropdown-menu-open-class": "bg-blue-500"}

    @pytest.mark.unit
    def test_blank_name(self):
        """Blank names are rejected."""
        with pytest.raises(BlankIdentifier):
            Dropdown().stimulus_class("", "block")


class TestStimulusAction:
    """Tests for action attributes."""

    @pytest.mark.unit
    def test_mapping(self):
        """Event mappings produce one descriptor per event."""
        result = Dropdown().stimulus_action({"click": "toggle", "mouseenter": "show"})
        assert result == {"data-action": "click->dropdown#toggle mouseenter->dropdown#show"}

    @pytest.mark.unit
    def test_empty_mapping(self):
        """An empty mapping yields an empty action."""
        assert Dropdown().stimulus_action({}) == {"data-action": ""}

    @pytest.mark.unit
    def test_method_name(self):
        """A bare method targets the controller."""
        assert Dropdown().stimulus_action("toggle") == {"data-action": "dropdown#toggle"}
        assert Dropdown().stimulus_action(Event.TOGGLE) == {"data-action": "dropdown#toggle"}

    @pytest.mark.unit
    def test_explicit_controller(self):
        """An explicit controller overrides the default."""
        assert action_attribute("modal", "toggle") == {"data-action": "modal#toggle"}

    @pytest.mark.unit
    def test_manual_controller_rejected(self):
        """Descriptors that already name the controller are rejected."""
        with pytest.raises(InvalidStimulusAction, match="Do not include controller name manually"):
            Dropdown().stimulus_action("click->dropdown#toggle")

    @pytest.mark.unit
    def test_invalid_format(self):
        """Unsupported action types are rejected."""
        with pytest.raises(InvalidStimulusAction, match="Invalid format for stimulus_action"):
            Dropdown().stimulus_action(123)


class TestStimulusController:
    """Tests for controller resolution."""

    @pytest.mark.unit
    def test_dasherized(self):
        """The controller name is dasherized."""
        assert DropdownMenu().stimulus_controller() == "dropdown-menu"
        assert Dropdown().stimulus_controller() == "dropdown"

    @pytest.mark.unit
    def test_missing(self):
        """No controller raises."""
        with pytest.raises(MissingStimulusController, match="No Stimulus controller available"):
            Unbound().stimulus_controller()

    @pytest.mark.unit
    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank(self, blank):
        """Blank controllers raise."""
        helper = Unbound()
        helper.stimulus = blank
        with pytest.raises(MissingStimulusController, match="^Stimulus controller cannot be blank$"):
            helper.stimulus_controller()

    @pytest.mark.unit
    def test_combined(self):
        """Builders compose into one attribute map."""
        dropdown = Dropdown()
        attrs = {
            **dropdown.stimulus_target("menu"),
            **dropdown.stimulus_value("open", False),
            **dropdown.stimulus_action({"click": "toggle"}),
        }
        assert attrs == {
            "data-dropdown-target": "menu",
            "data-dropdown-open-value": False,
            "data-action": "click->dropdown#toggle",
        }
