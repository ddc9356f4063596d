"""Unit tests for the option DSL."""

import itertools
from enum import Enum

import pytest

from .lib import (
    NO_DEFAULT,
    InvalidEnumValue,
    MissingRequiredOption,
    Option,
    Optionable,
    OptionRegistry,
    OptionSpec,
    OptionState,
    PomError,
    is_present,
)

# =============================================================================
# Sample types
# =============================================================================


class Size(Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"


class Basic(Optionable):
    name = Option()
    size = Option(default="md")
    variant = Option(enums=("solid", "outline", "ghost"))

    def __init__(self, **kwargs):
        self.initialize_options(**kwargs)


class Required(Optionable):
    title = Option(required=True)
    description = Option()
    status = Option(required=True, default="active")

    def __init__(self, **kwargs):
        self.initialize_options(**kwargs)


class Enumerated(Optionable):
    size = Option(enums=Size, default=Size.MD)
    color = Option(enums=("red", "blue", "green"))
    columns = Option(enums=(1, 2, 3))

    def __init__(self, **kwargs):
        self.initialize_options(**kwargs)


class Inherited(Basic):
    color = Option(enums=("red", "blue", "green"), default="blue")
    disabled = Option(default=False)


class Overriding(Basic):
    size = Option(enums=("sm", "md", "lg", "xl"), default="lg")


# =============================================================================
# Registry
# =============================================================================


class TestOptionRegistry:
    """Tests for OptionRegistry construction and queries."""

    @pytest.mark.unit
    def test_inherit_is_independent(self):
        """Declaring on a derived builder leaves the parent untouched."""
        parent = OptionRegistry().inherit().declare("size", default="md").build()
        child = parent.inherit().declare("size", default="lg").declare("tone").build()

        assert parent.resolve_default("size") == "md"
        assert child.resolve_default("size") == "lg"
        assert "tone" not in parent

    @pytest.mark.unit
    def test_enums_normalized_at_declaration(self):
        """Enum members are stored in canonical form."""
        registry = OptionRegistry().inherit().declare("size", enums=Size).build()
        assert registry.enum_values_for("size") == ("sm", "md", "lg")

    @pytest.mark.unit
    def test_dynamic_default_recomputed(self):
        """A default provider is invoked on every resolution."""
        counter = itertools.count(1)
        registry = OptionRegistry().inherit().declare("tick", default=lambda: next(counter)).build()

        assert registry.resolve_default("tick") == 1
        assert registry.resolve_default("tick") == 2

    @pytest.mark.unit
    def test_required_and_optional_partition(self):
        """Required options with a default count as optional."""
        registry = Required.options()
        assert registry.required_names() == ["title"]
        assert registry.optional_names() == ["description", "status"]

    @pytest.mark.unit
    def test_to_dict(self):
        """The registry describes itself as plain data."""
        described = Enumerated.options().to_dict()
        assert described["size"]["enums"] == ["sm", "md", "lg"]
        assert described["size"]["default"] == "md"
        assert described["color"]["default"] is None
        assert described["color"]["enforced"] is False

    @pytest.mark.unit
    def test_registry_is_read_only(self):
        """Registries do not support item assignment."""
        with pytest.raises(TypeError):
            Basic.options()["extra"] = OptionSpec(name="extra")


class TestOptionSpec:
    """Tests for OptionSpec normalization."""

    @pytest.mark.unit
    def test_no_default_sentinel(self):
        """NO_DEFAULT is distinct from a None default."""
        assert not OptionSpec(name="a").has_default
        assert OptionSpec(name="a", default=None).has_default
        assert repr(NO_DEFAULT) == "NO_DEFAULT"

    @pytest.mark.unit
    def test_string_rendering_accepted(self):
        """The string rendering of an enum value coerces to the value."""
        spec = OptionSpec(name="columns", enums=(1, 2, 3))
        assert spec.normalize("2") == 2

    @pytest.mark.unit
    def test_boolean_is_not_an_integer_enum(self):
        """True does not match an enum value of 1."""
        spec = OptionSpec(name="columns", enums=(1, 2))
        with pytest.raises(InvalidEnumValue):
            spec.normalize(True)


# =============================================================================
# Accessors
# =============================================================================


class TestAccessors:
    """Tests for generated option accessors."""

    @pytest.mark.unit
    def test_getter(self):
        """The attribute returns the supplied value."""
        assert Basic(name="test").name == "test"

    @pytest.mark.unit
    def test_setter(self):
        """Assignment updates the value."""
        component = Basic()
        component.name = "updated"
        assert component.name == "updated"

    @pytest.mark.unit
    def test_predicate(self):
        """option_present tracks meaningful presence."""
        component = Basic(name="test")
        assert component.option_present("name")

        component.name = None
        assert not component.option_present("name")

    @pytest.mark.unit
    def test_unset_without_default_is_none(self):
        """An option without value or default reads as None."""
        component = Basic()
        assert component.name is None
        assert not component.option_present("name")

    @pytest.mark.unit
    def test_default_used(self):
        """The default applies when nothing is supplied."""
        assert Basic().size == "md"

    @pytest.mark.unit
    def test_default_overridden(self):
        """A supplied value replaces the default."""
        assert Basic(size="lg").size == "lg"

    @pytest.mark.unit
    def test_explicit_none_reads_as_default(self):
        """Assigning None falls back to the default."""
        component = Basic(size="lg")
        component.size = None
        assert component.size == "md"

    @pytest.mark.unit
    def test_class_access_returns_descriptor(self):
        """Class attribute access exposes the declaration."""
        assert isinstance(Basic.size, Option)
        assert Basic.size.name == "size"


# =============================================================================
# Enum validation
# =============================================================================


class TestEnumValidation:
    """Tests for enum-constrained options."""

    @pytest.mark.unit
    def test_valid_value(self):
        """Allowed values are accepted in canonical form."""
        assert Enumerated(size="lg").size == "lg"

    @pytest.mark.unit
    def test_enum_member_collapses(self):
        """Enum members are stored as their value."""
        assert Enumerated(size=Size.SM).size == "sm"
        assert Enumerated().size == "md"

    @pytest.mark.unit
    def test_invalid_value(self):
        """Values outside the set raise with the allowed values listed."""
        with pytest.raises(InvalidEnumValue, match="Invalid value for size: xl. Must be one of sm, md, lg") as exc:
            Enumerated(size="xl")
        assert exc.value.name == "size"
        assert exc.value.value == "xl"
        assert exc.value.allowed == ("sm", "md", "lg")

    @pytest.mark.unit
    def test_invalid_value_is_value_error(self):
        """Enum errors are catchable as ValueError and PomError."""
        with pytest.raises(ValueError):
            Enumerated(color="purple")
        with pytest.raises(PomError):
            Enumerated(color="purple")

    @pytest.mark.unit
    def test_none_allowed(self):
        """None bypasses enum validation."""
        assert Enumerated(color=None).color is None

    @pytest.mark.unit
    def test_setter_validates(self):
        """Post-construction assignment validates too."""
        component = Enumerated()
        component.size = "sm"
        assert component.size == "sm"

        with pytest.raises(InvalidEnumValue, match="Invalid value for size"):
            component.size = "invalid"

    @pytest.mark.unit
    def test_string_input_for_numeric_enum(self):
        """Strings coerce to the matching non-string enum value."""
        assert Enumerated(columns="3").columns == 3


# =============================================================================
# Required options
# =============================================================================


class TestRequiredOptions:
    """Tests for required options."""

    @pytest.mark.unit
    def test_missing(self):
        """A missing required option fails construction."""
        with pytest.raises(MissingRequiredOption, match="Missing required option: title") as exc:
            Required(description="test")
        assert exc.value.name == "title"

    @pytest.mark.unit
    def test_provided(self):
        """A supplied required option is stored."""
        assert Required(title="Test Title").title == "Test Title"

    @pytest.mark.unit
    def test_empty_value_satisfies(self):
        """An empty string still counts as supplied."""
        assert Required(title="").title == ""

    @pytest.mark.unit
    def test_required_with_default(self):
        """A required option with a default is always satisfiable."""
        assert Required(title="Test").status == "active"
        assert Required(title="Test", status="inactive").status == "inactive"


# =============================================================================
# Extra options
# =============================================================================


class TestExtraOptions:
    """Tests for unrecognized inputs."""

    @pytest.mark.unit
    def test_captured(self):
        """Unknown keys land verbatim in extra_options."""
        component = Basic(name="test", custom_attr="value", another=123)
        assert component.extra_options["custom_attr"] == "value"
        assert component.extra_options["another"] == 123

    @pytest.mark.unit
    def test_declared_options_excluded(self):
        """Declared options never appear in extra_options."""
        component = Basic(name="test", size="lg")
        assert "name" not in component.extra_options
        assert "size" not in component.extra_options

    @pytest.mark.unit
    def test_empty(self):
        """No extras yields an empty mapping."""
        assert len(Basic(name="test").extra_options) == 0

    @pytest.mark.unit
    def test_read_only_and_ordered(self):
        """extra_options preserves input order and rejects writes."""
        component = Basic(b=1, a=2)
        assert list(component.extra_options) == ["b", "a"]
        with pytest.raises(TypeError):
            component.extra_options["c"] = 3

    @pytest.mark.unit
    def test_mapping_input(self):
        """A mapping with string keys works like keyword arguments."""
        state = OptionState(Basic.options(), {"name": "x", "data-role": "panel"})
        assert state.get("name") == "x"
        assert dict(state.extra_options) == {"data-role": "panel"}


# =============================================================================
# Introspection
# =============================================================================


class TestIntrospection:
    """Tests for class-level option queries."""

    @pytest.mark.unit
    def test_enum_values_for(self):
        """Enum values are listed in declaration order."""
        assert Enumerated.enum_values_for("color") == ("red", "blue", "green")
        assert Basic.enum_values_for("name") is None

    @pytest.mark.unit
    def test_default_value_for(self):
        """Default values are reported, None when absent."""
        assert Basic.default_value_for("size") == "md"
        assert Basic.default_value_for("name") is None

    @pytest.mark.unit
    def test_required_options(self):
        """Only required options without default are listed."""
        assert Required.required_options() == ["title"]

    @pytest.mark.unit
    def test_optional_options(self):
        """Optional options include required ones with a default."""
        optional = Required.optional_options()
        assert "description" in optional
        assert "status" in optional
        assert "title" not in optional


# =============================================================================
# Instance state helpers
# =============================================================================


class TestInstanceState:
    """Tests for option_values, option_set and reset_option."""

    @pytest.mark.unit
    def test_option_values(self):
        """Every declared option is reported."""
        values = Basic(name="test", size="sm").option_values()
        assert values == {"name": "test", "size": "sm", "variant": None}

    @pytest.mark.unit
    def test_option_set(self):
        """Explicit and initialization defaults count as set."""
        assert Basic(name="test").option_set("name")
        assert not Basic().option_set("name")
        assert Basic().option_set("size")
        assert not Basic().option_set("unknown")

    @pytest.mark.unit
    def test_reset_clears_value(self):
        """Resetting an option without default yields None."""
        component = Basic(name="test")
        component.reset_option("name")
        assert component.name is None
        assert not component.option_set("name")

    @pytest.mark.unit
    def test_reset_restores_default(self):
        """Resetting an option with default restores it."""
        component = Basic(size="lg")
        component.reset_option("size")
        assert component.size == "md"

    @pytest.mark.unit
    def test_reset_unknown_is_noop(self):
        """Resetting an undeclared name does nothing."""
        Basic().reset_option("non_existent")

    @pytest.mark.unit
    def test_dynamic_default_read_each_time(self):
        """A callable default is evaluated on every read."""
        counter = itertools.count(1)

        class Clocked(Optionable):
            tick = Option(default=lambda: next(counter))

            def __init__(self, **kwargs):
                self.initialize_options(**kwargs)

        component = Clocked()
        assert component.tick == 1
        assert component.tick == 2

    @pytest.mark.unit
    def test_dynamic_default_returned_unchecked(self):
        """A callable default outside the enum set is read back as is."""

        class Themed(Optionable):
            theme = Option(enums=["light", "dark"], default=lambda: "sepia")

            def __init__(self, **kwargs):
                self.initialize_options(**kwargs)

        component = Themed()
        assert component.theme == "sepia"
        assert component.option_values() == {"theme": "sepia"}
        assert component.option_set("theme") is False


# =============================================================================
# Inheritance
# =============================================================================


class TestInheritance:
    """Tests for option inheritance across subclasses."""

    @pytest.mark.unit
    def test_inherits_parent_options(self):
        """Subclasses see parent options alongside their own."""
        component = Inherited(name="test", color="red")
        assert component.name == "test"
        assert component.color == "red"
        assert component.size == "md"
        assert component.disabled is False

    @pytest.mark.unit
    def test_parent_unaffected(self):
        """Child declarations do not leak into the parent."""
        assert "color" not in Basic.options()
        assert set(Inherited.options()) == {"name", "size", "variant", "color", "disabled"}

    @pytest.mark.unit
    def test_redeclared_default(self):
        """Redeclaring an option only affects the subclass."""
        assert Overriding.default_value_for("size") == "lg"
        assert Basic.default_value_for("size") == "md"
        assert Overriding(size="xl").size == "xl"
        with pytest.raises(InvalidEnumValue):
            Basic(variant="xl")

    @pytest.mark.unit
    def test_option_classmethod(self):
        """option() after the class body extends only that class."""

        class Parent(Optionable):
            def __init__(self, **kwargs):
                self.initialize_options(**kwargs)

        class Child(Parent):
            pass

        Parent.option("tone", enums=("light", "dark"), default="light")

        assert Parent().tone == "light"
        assert "tone" not in Child.options()
        with pytest.raises(AttributeError):
            Child().tone


class TestIsPresent:
    """Tests for the presence predicate."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, False, "", "   ", [], {}])
    def test_blank(self, value):
        """Blank values are not present."""
        assert not is_present(value)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [0, True, "x", ["a"], "md"])
    def test_present(self, value):
        """Everything else is present."""
        assert is_present(value)
