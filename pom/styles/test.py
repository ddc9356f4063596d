"""Unit tests for style definitions and resolution."""

from enum import Enum

import pytest

from pom.config import configure

from .lib import (
    StyleRegistry,
    StyleResolver,
    Styleable,
    Styles,
    merge_style_maps,
    resolve_rule,
    select_variant,
)

# =============================================================================
# Sample types
# =============================================================================


class Variant(Enum):
    SOLID = "solid"
    OUTLINE = "outline"


class Button(Styleable):
    styles = Styles(
        base="btn",
        variant={
            "solid": "bg-blue-500 text-white",
            "outline": "border border-blue-500 text-blue-500",
            "ghost": "text-blue-500",
        },
        size={
            "sm": "text-sm px-2 py-1",
            "md": "text-base px-4 py-2",
            "lg": "text-lg px-6 py-3",
        },
    )


class LinkButton(Button):
    styles = Styles(
        variant={"link": "underline text-blue-600"},
        color={"red": "text-red-500", "blue": "text-blue-500"},
    )


class Sectioned(Styleable):
    styles = Styles(
        base={
            "default": "btn rounded",
            "hover": "hover:opacity-80",
            "pressed": "active:scale-95",
        },
        variant={"solid": "bg-indigo-500", "outline": "border border-indigo-500"},
    )


class Computed(Styleable):
    styles = Styles(
        base="component",
        variant={
            "solid": lambda color=None, disabled=False: " ".join(
                ["bg-%s-500" % (color or "blue")] + (["opacity-50"] if disabled else [])
            ),
            "outline": lambda color=None, **_: "border border-%s-500" % (color or "blue"),
        },
    )


class Grouped(Styleable):
    styles = Styles(base="card")
    header = Styles("header", base="px-4 py-2", size={"lg": "px-6 py-4"})


class Toggle(Styleable):
    styles = Styles(
        base="toggle",
        disabled={True: "opacity-50 cursor-not-allowed", False: "cursor-pointer"},
    )


# =============================================================================
# Merge rule
# =============================================================================


class TestMergeStyleMaps:
    """Tests for the style map merge rule."""

    @pytest.mark.unit
    def test_nested_mappings_merge(self):
        """Child sub-keys override, parent sub-keys survive."""
        merged = merge_style_maps(
            {"variant": {"solid": "a", "outline": "b"}},
            {"variant": {"solid": "c", "link": "d"}},
        )
        assert merged == {"variant": {"solid": "c", "outline": "b", "link": "d"}}

    @pytest.mark.unit
    def test_type_mismatch_replaces(self):
        """A string replaces a mapping and vice versa."""
        assert merge_style_maps({"base": {"a": "x"}}, {"base": "y"}) == {"base": "y"}
        assert merge_style_maps({"base": "y"}, {"base": {"a": "x"}}) == {"base": {"a": "x"}}

    @pytest.mark.unit
    def test_inputs_not_mutated(self):
        """Both inputs stay unchanged."""
        existing = {"variant": {"solid": "a"}}
        merge_style_maps(existing, {"variant": {"outline": "b"}})
        assert existing == {"variant": {"solid": "a"}}


class TestStyleRegistry:
    """Tests for StyleRegistry."""

    @pytest.mark.unit
    def test_define_group_accumulates(self):
        """Repeated definitions augment nested mappings."""
        registry = StyleRegistry()
        registry.define_group("default", {"variant": {"solid": "a"}})
        registry.define_group("default", {"variant": {"outline": "b"}, "base": "btn"})
        assert registry.to_dict() == {"default": {"variant": {"solid": "a", "outline": "b"}, "base": "btn"}}

    @pytest.mark.unit
    def test_groups_read_only(self):
        """Exposed groups reject writes."""
        registry = StyleRegistry({"default": {"base": "btn"}})
        with pytest.raises(TypeError):
            registry["default"]["base"] = "other"


# =============================================================================
# Rule resolution
# =============================================================================


class TestRuleResolution:
    """Tests for resolve_rule and select_variant."""

    @pytest.mark.unit
    def test_string(self):
        """Strings resolve to themselves."""
        assert resolve_rule("btn", {}) == "btn"

    @pytest.mark.unit
    def test_mapping_joins_all(self):
        """A mapping resolves every sub-rule."""
        assert resolve_rule({"a": "x", "b": "", "c": "y"}, {}) == "x y"

    @pytest.mark.unit
    def test_callable_receives_declared_parameters(self):
        """Functions only receive the values they name."""
        assert resolve_rule(lambda size: f"w-{size}", {"size": 4, "variant": "x"}) == "w-4"

    @pytest.mark.unit
    def test_callable_with_var_keyword(self):
        """Functions with **kwargs receive every value."""
        assert resolve_rule(lambda **values: " ".join(sorted(values)), {"b": 1, "a": 2}) == "a b"

    @pytest.mark.unit
    def test_callable_result_stringified(self):
        """Non-string results are converted, None becomes empty."""
        assert resolve_rule(lambda: 12, {}) == "12"
        assert resolve_rule(lambda: None, {}) == ""

    @pytest.mark.unit
    def test_boolean_uses_boolean_keys(self):
        """True/False select the boolean keys, never the strings."""
        rule = {True: "yes", "true": "string-yes", False: "no"}
        assert select_variant(rule, True) == "yes"
        assert select_variant(rule, False) == "no"
        assert select_variant(rule, "true") == "string-yes"

    @pytest.mark.unit
    def test_boolean_does_not_match_integers(self):
        """Integer keys are not boolean keys."""
        assert select_variant({1: "one"}, True) is None
        assert select_variant({True: "yes"}, 1) is None

    @pytest.mark.unit
    def test_enum_and_string_forms(self):
        """Enum members and string renderings both match."""
        assert select_variant({"solid": "a"}, Variant.SOLID) == "a"
        assert select_variant({2: "grid-cols-2"}, "2") == "grid-cols-2"
        assert select_variant({"solid": "a"}, "missing") is None


# =============================================================================
# Resolution through Styleable
# =============================================================================


class TestStylesFor:
    """Tests for styles_for on Styleable classes."""

    @pytest.mark.unit
    def test_base_and_variant(self):
        """Base always applies; the selected variant is added."""
        classes = Button().styles_for(variant="solid").split()
        assert "btn" in classes
        assert "bg-blue-500" in classes
        assert "text-white" in classes
        assert "border" not in classes

    @pytest.mark.unit
    def test_multiple_keys(self):
        """Each supplied key contributes its variant."""
        assert Button().styles_for(variant="outline", size="lg") == (
            "btn border border-blue-500 text-blue-500 text-lg px-6 py-3"
        )

    @pytest.mark.unit
    def test_keys_are_opt_in(self):
        """Keys missing from the call are not applied."""
        assert Button().styles_for() == "btn"

    @pytest.mark.unit
    def test_none_suppresses_key(self):
        """A None value contributes nothing."""
        assert Button().styles_for(variant=None, size="sm") == "btn text-sm px-2 py-1"

    @pytest.mark.unit
    def test_unknown_variant(self):
        """A value without a matching variant contributes nothing."""
        assert Button().styles_for(variant="unknown") == "btn"

    @pytest.mark.unit
    def test_enum_value(self):
        """Enum members select by their value."""
        assert Button().styles_for(variant=Variant.SOLID) == "btn bg-blue-500 text-white"

    @pytest.mark.unit
    def test_mapping_instead_of_group(self):
        """A mapping in place of the group targets the default group."""
        assert Button().styles_for({"variant": "ghost"}) == "btn text-blue-500"

    @pytest.mark.unit
    def test_sectioned_base(self):
        """Mapping bases apply every section."""
        assert Sectioned().styles_for(variant="solid") == (
            "btn rounded hover:opacity-80 active:scale-95 bg-indigo-500"
        )

    @pytest.mark.unit
    def test_computed_variant(self):
        """Function variants see the other values."""
        assert Computed().styles_for(variant="solid", color="red") == "component bg-red-500"
        assert Computed().styles_for(variant="solid", disabled=True) == "component bg-blue-500 opacity-50"
        assert Computed().styles_for(variant="outline", color="green") == "component border border-green-500"

    @pytest.mark.unit
    def test_custom_group(self):
        """Named groups resolve independently."""
        assert Grouped().styles_for() == "card"
        assert Grouped().styles_for("header", size="lg") == "px-6 py-4"

    @pytest.mark.unit
    def test_undefined_group(self):
        """Unknown groups resolve to an empty string."""
        assert Grouped().styles_for("missing") == ""

    @pytest.mark.unit
    def test_boolean_key(self):
        """Boolean keys dispatch on True and False."""
        enabled = Toggle().styles_for(disabled=False)
        disabled = Toggle().styles_for(disabled=True)
        assert "cursor-pointer" in enabled and "opacity-50" not in enabled
        assert "opacity-50" in disabled and "cursor-pointer" not in disabled

    @pytest.mark.unit
    def test_conflicts_resolved(self):
        """Later conflicting utilities replace the base ones."""

        class Alert(Styleable):
            styles = Styles(base="p-4 bg-blue-500", variant={"danger": "p-6 bg-red-500"})

        assert Alert().styles_for(variant="danger") == "p-6 bg-red-500"

    @pytest.mark.unit
    def test_deterministic(self):
        """Repeated resolution gives identical output."""
        button = Button()
        assert button.styles_for(variant="solid", size="md") == button.styles_for(variant="solid", size="md")


# =============================================================================
# Inheritance
# =============================================================================


class TestStyleInheritance:
    """Tests for ancestor-first style merging."""

    @pytest.mark.unit
    def test_inherits_parent_styles(self):
        """Subclasses resolve parent keys."""
        assert LinkButton().styles_for(variant="solid") == "btn bg-blue-500 text-white"

    @pytest.mark.unit
    def test_extends_variants(self):
        """Subclass variants are added to the parent's."""
        variants = LinkButton.style_definitions()["default"]["variant"]
        assert set(variants) == {"solid", "outline", "ghost", "link"}
        assert "link" not in Button.style_definitions()["default"]["variant"]

    @pytest.mark.unit
    def test_new_keys(self):
        """Subclasses may introduce new keys."""
        assert LinkButton().styles_for(color="red") == "btn text-red-500"

    @pytest.mark.unit
    def test_string_rule_replaced(self):
        """A child string rule replaces the parent's."""

        class Plain(Button):
            styles = Styles(base="plain")

        assert Plain().styles_for() == "plain"
        assert Button().styles_for() == "btn"

    @pytest.mark.unit
    def test_later_definitions_visible(self):
        """Definitions added after a cached read are picked up."""

        class Parent(Styleable):
            styles = Styles(base="parent")

        class Child(Parent):
            pass

        assert Child().styles_for() == "parent"
        Parent.define_styles(tone={"muted": "opacity-75"})
        assert Child().styles_for(tone="muted") == "parent opacity-75"

    @pytest.mark.unit
    def test_define_styles_with_mapping(self):
        """define_styles accepts a mapping for the default group."""

        class Panel(Styleable):
            pass

        Panel.define_styles({"base": "panel"})
        Panel.define_styles("body", base="p-4")
        assert Panel().styles_for() == "panel"
        assert Panel().styles_for("body") == "p-4"


# =============================================================================
# Conflict resolver plumbing
# =============================================================================


class TestStyleResolver:
    """Tests for StyleResolver."""

    @pytest.mark.unit
    def test_explicit_resolver(self):
        """A resolver passed in is used for the final merge."""

        class Joiner:
            def merge(self, classes: str) -> str:
                return "|".join(classes.split())

        resolver = StyleResolver({"default": {"base": "a b"}}, conflict_resolver=Joiner())
        assert resolver.resolve("default", {}) == "a|b"

    @pytest.mark.unit
    def test_configured_resolver(self):
        """The configured resolver is used by default."""

        class Upper:
            def merge(self, classes: str) -> str:
                return classes.upper()

        configure(conflict_resolver=Upper())
        assert Button().styles_for(variant="ghost") == "BTN TEXT-BLUE-500"

    @pytest.mark.unit
    def test_empty_result_skips_resolver(self):
        """Nothing to merge yields an empty string."""
        resolver = StyleResolver({"default": {"base": ""}})
        assert resolver.resolve("default", {}) == ""
