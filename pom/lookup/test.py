"""Unit tests for component lookup."""

import sys

import pytest

from pom.config import configure

from .lib import ComponentLookup, Renderer, UndefinedComponentType, camelize


class ButtonComponent:
    def __init__(self, label=None, **kwargs):
        self.label = label
        self.kwargs = kwargs


class UserProfileCardComponent:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


class NotAComponentHelper:
    pass


def html_renderer(component, content=None):
    return f"<{type(component).__name__} label={component.label!r}>{content or ''}</>"


@pytest.fixture
def lookup() -> ComponentLookup:
    registry = ComponentLookup()
    registry.register(ButtonComponent)
    registry.register(UserProfileCardComponent)
    return registry


class TestClassNames:
    """Tests for helper name conversion."""

    @pytest.mark.unit
    def test_camelize(self):
        """Snake case converts to CamelCase."""
        assert camelize("user_profile_card") == "UserProfileCard"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("helper", "class_name"),
        [
            ("pom_button", "ButtonComponent"),
            ("pom_user_profile_card", "UserProfileCardComponent"),
            ("pom_test", "TestComponent"),
        ],
    )
    def test_class_name_for(self, lookup, helper, class_name):
        """The prefix is stripped and the rest camelized."""
        assert lookup.class_name_for(helper) == class_name

    @pytest.mark.unit
    def test_configured_prefixes(self, lookup):
        """Prefixes come from configuration."""
        configure(component_prefixes=["pom", "ui"])
        assert lookup.is_helper_name("ui_button")
        assert lookup.lookup("ui_button") is ButtonComponent

    @pytest.mark.unit
    def test_explicit_prefixes(self):
        """Explicit prefixes ignore configuration."""
        registry = ComponentLookup(prefixes=["admin"])
        assert registry.is_helper_name("admin_button")
        assert not registry.is_helper_name("pom_button")

    @pytest.mark.unit
    def test_prefix_alone_is_not_a_helper(self, lookup):
        """A bare prefix names no component."""
        assert not lookup.is_helper_name("pom_")


class TestLookup:
    """Tests for lookup and is_defined."""

    @pytest.mark.unit
    def test_lookup(self, lookup):
        """Registered classes resolve."""
        assert lookup.lookup("pom_user_profile_card") is UserProfileCardComponent

    @pytest.mark.unit
    def test_undefined(self, lookup):
        """Unknown names raise with the resolved class name."""
        with pytest.raises(UndefinedComponentType, match="Component class 'UndefinedComponentXyzComponent' is not defined") as exc:
            lookup.lookup("pom_undefined_component_xyz")
        assert exc.value.class_name == "UndefinedComponentXyzComponent"

    @pytest.mark.unit
    def test_undefined_is_lookup_error(self, lookup):
        """Lookup failures are LookupErrors."""
        with pytest.raises(LookupError):
            lookup.lookup("pom_missing")

    @pytest.mark.unit
    def test_unprefixed_name(self, lookup):
        """Names without a known prefix do not resolve."""
        with pytest.raises(UndefinedComponentType):
            lookup.lookup("button")

    @pytest.mark.unit
    def test_is_defined(self, lookup):
        """is_defined reports availability without raising."""
        assert lookup.is_defined("pom_button")
        assert not lookup.is_defined("pom_missing")


class TestRegistration:
    """Tests for register, unregister and discover."""

    @pytest.mark.unit
    def test_register_as_decorator(self):
        """register returns the class."""
        registry = ComponentLookup()

        @registry.register
        class AlertComponent:
            pass

        assert registry.lookup("pom_alert") is AlertComponent

    @pytest.mark.unit
    def test_register_under_name(self):
        """Classes can be registered under another name."""
        registry = ComponentLookup()
        registry.register(NotAComponentHelper, name="HelperComponent")
        assert registry.lookup("pom_helper") is NotAComponentHelper

    @pytest.mark.unit
    def test_unregister(self, lookup):
        """Unregistered names no longer resolve."""
        lookup.unregister("ButtonComponent")
        lookup.unregister("NeverRegistered")
        assert not lookup.is_defined("pom_button")

    @pytest.mark.unit
    def test_discover(self):
        """Only *Component classes defined in the module are registered."""
        registry = ComponentLookup()
        found = registry.discover(sys.modules[__name__])

        assert found == [ButtonComponent, UserProfileCardComponent]
        assert "NotAComponentHelper" not in registry
        assert "ComponentLookup" not in registry
        assert len(registry) == 2


class TestRender:
    """Tests for render."""

    @pytest.mark.unit
    def test_render(self, lookup):
        """The component is built from the arguments and rendered."""
        html = lookup.render("pom_button", html_renderer, "Save", content="!")
        assert html == "<ButtonComponent label='Save'>!</>"

    @pytest.mark.unit
    def test_render_keyword_arguments(self, lookup):
        """Keyword arguments reach the component."""
        captured = []
        lookup.render("pom_user_profile_card", lambda component, content: captured.append(component), name="Ada")
        assert captured[0].kwargs == {"name": "Ada"}

    @pytest.mark.unit
    def test_renderer_protocol(self):
        """Plain functions satisfy the renderer protocol."""
        assert isinstance(html_renderer, Renderer)

    @pytest.mark.unit
    def test_render_undefined(self, lookup):
        """Rendering an unknown component raises before rendering."""
        with pytest.raises(UndefinedComponentType):
            lookup.render("pom_missing", html_renderer)
