"""Unit tests for attribute map merging."""

import pytest

from .lib import merge_classes, merge_data, merge_options, normalize_classes


class TestNormalizeClasses:
    """Tests for class value normalization."""

    @pytest.mark.unit
    def test_string_stripped(self):
        """Strings lose surrounding whitespace."""
        assert normalize_classes("  btn p-4 ") == "btn p-4"

    @pytest.mark.unit
    def test_nested_list_flattened(self):
        """Nested lists flatten with empties dropped."""
        assert normalize_classes(["btn", ["", "p-4", None], ("shadow",)]) == "btn p-4 shadow"

    @pytest.mark.unit
    def test_other_values(self):
        """Unsupported values normalize to an empty string."""
        assert normalize_classes(None) == ""
        assert normalize_classes(42) == ""


class TestMergeClasses:
    """Tests for class merging."""

    @pytest.mark.unit
    def test_conflicts_resolved(self):
        """Later utilities win."""
        assert merge_classes("text-left text-blue-500", "text-right text-red-500") == "text-right text-red-500"

    @pytest.mark.unit
    def test_list_input(self):
        """Lists merge like strings."""
        assert merge_classes(["p-4", "btn"], "p-2") == "btn p-2"


class TestMergeData:
    """Tests for data map merging."""

    @pytest.mark.unit
    def test_controller_and_action_accumulate(self):
        """controller and action values are joined."""
        merged = merge_data(
            {"controller": "modal", "action": "click->modal#open"},
            {"controller": "tooltip", "action": "hover->tooltip#show"},
        )
        assert merged == {
            "controller": "modal tooltip",
            "action": "click->modal#open hover->tooltip#show",
        }

    @pytest.mark.unit
    def test_duplicates_and_none_skipped(self):
        """Identical and None values are not repeated."""
        assert merge_data({"controller": "modal"}, {"controller": "modal"}) == {"controller": "modal"}
        assert merge_data({"controller": "modal"}, {"controller": None}) == {"controller": "modal"}

    @pytest.mark.unit
    def test_other_keys_override(self):
        """Other data keys follow plain override."""
        assert merge_data({"id": 1, "role": "a"}, {"role": "b"}) == {"id": 1, "role": "b"}


class TestMergeOptions:
    """Tests for merge_options."""

    @pytest.mark.unit
    def test_later_maps_win(self):
        """Plain keys are overridden left to right."""
        merged = merge_options({"id": "a", "title": "x"}, {"id": "b"}, {"role": "button"})
        assert merged == {"id": "b", "title": "x", "role": "button"}

    @pytest.mark.unit
    def test_class_conflicts(self):
        """Conflicting utilities resolve with last wins."""
        merged = merge_options({"class": "text-left text-blue-500"}, {"class": "text-right text-red-500"})
        assert merged == {"class": "text-right text-red-500"}

    @pytest.mark.unit
    def test_data_accumulates(self):
        """Controllers and actions from each layer are kept."""
        merged = merge_options(
            {"data": {"controller": "modal", "action": "click->modal#open"}},
            {"data": {"controller": "tooltip", "action": "hover->tooltip#show"}},
        )
        assert merged["data"]["controller"] == "modal tooltip"
        assert merged["data"]["action"] == "click->modal#open hover->tooltip#show"

    @pytest.mark.unit
    def test_none_and_empty_skipped(self):
        """None and empty maps do not affect the result."""
        assert merge_options(None, {}, {"class": "btn"}, None) == {"class": "btn"}
        assert merge_options() == {}

    @pytest.mark.unit
    def test_single_value_copied_verbatim(self):
        """A key seen once keeps its original value."""
        assert merge_options({"class": ["btn", "p-4"]}) == {"class": ["btn", "p-4"]}

    @pytest.mark.unit
    def test_inputs_not_mutated(self):
        """Input maps are left untouched."""
        first = {"class": "p-4", "data": {"controller": "modal"}}
        second = {"class": "p-6", "data": {"controller": "tooltip"}}
        merge_options(first, second)
        assert first == {"class": "p-4", "data": {"controller": "modal"}}
        assert second == {"class": "p-6", "data": {"controller": "tooltip"}}
