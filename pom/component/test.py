"""Unit tests for the Component base class."""

import re

import pytest

from pom.lookup import ComponentLookup, default_lookup
from pom.options import InvalidEnumValue, MissingRequiredOption, Option
from pom.styles import Styles

from .lib import Component


class ButtonComponent(Component):
    variant = Option(enums=("solid", "outline", "ghost"), default="solid")
    size = Option(enums=("sm", "md", "lg"), default="md")
    disabled = Option(default=False)

    styles = Styles(
        base="btn inline-flex items-center",
        variant={
            "solid": "bg-blue-500 text-white",
            "outline": "border border-blue-500 text-blue-500",
            "ghost": "text-blue-500",
        },
        size={"sm": "text-sm px-2 py-1", "md": "text-base px-4 py-2", "lg": "text-lg px-6 py-3"},
        disabled={True: "opacity-50 cursor-not-allowed", False: "cursor-pointer"},
    )

    def html_attributes(self):
        classes = self.styles_for(variant=self.variant, size=self.size, disabled=self.disabled)
        return self.merge_options({"class": classes, "id": self.auto_id}, self.extra_options)


class IconButtonComponent(ButtonComponent):
    icon = Option(required=True)
    variant = Option(enums=("solid", "outline", "ghost", "link"), default="ghost")

    styles = Styles(variant={"link": "underline"})
    icon_styles = Styles("icon", base="w-4 h-4", size={"lg": "w-6 h-6"})


class DropdownMenuComponent(Component):
    stimulus = "dropdown-menu"


class TestComponentOptions:
    """Tests for options on components."""

    @pytest.mark.unit
    def test_defaults(self):
        """Declared defaults apply."""
        button = ButtonComponent()
        assert (button.variant, button.size, button.disabled) == ("solid", "md", False)

    @pytest.mark.unit
    def test_extra_options(self):
        """Unknown keyword arguments are kept as extra options."""
        button = ButtonComponent(type="submit", **{"aria-label": "Save"})
        assert dict(button.extra_options) == {"type": "submit", "aria-label": "Save"}

    @pytest.mark.unit
    def test_mapping_argument(self):
        """Options may be passed as a mapping."""
        assert ButtonComponent({"size": "lg", "class": "mt-2"}).size == "lg"

    @pytest.mark.unit
    def test_validation(self):
        """Option errors surface from the constructor."""
        with pytest.raises(InvalidEnumValue):
            ButtonComponent(variant="link")
        with pytest.raises(MissingRequiredOption):
            IconButtonComponent()

    @pytest.mark.unit
    def test_subclass_redeclaration(self):
        """Subclasses extend enums without touching the parent."""
        assert IconButtonComponent(icon="star", variant="link").variant == "link"
        assert ButtonComponent.enum_values_for("variant") == ("solid", "outline", "ghost")
        assert IconButtonComponent.default_value_for("variant") == "ghost"


class TestComponentStyles:
    """Tests for style resolution on components."""

    @pytest.mark.unit
    def test_html_attributes(self):
        """Styles and extra options merge into attributes."""
        button = ButtonComponent(variant="outline", size="sm", **{"class": "px-8 mt-2"})
        attributes = button.html_attributes()
        assert attributes["class"] == (
            "btn inline-flex items-center border border-blue-500 text-blue-500 text-sm py-1 cursor-pointer px-8 mt-2"
        )
        assert attributes["id"] == button.auto_id

    @pytest.mark.unit
    def test_disabled(self):
        """Boolean options select boolean variants."""
        classes = ButtonComponent(disabled=True).html_attributes()["class"]
        assert "opacity-50" in classes
        assert "cursor-pointer" not in classes

    @pytest.mark.unit
    def test_inherited_and_named_groups(self):
        """Subclasses add variants and groups."""
        icon = IconButtonComponent(icon="star", variant="link", size="lg")
        assert "underline" in icon.styles_for(variant=icon.variant).split()
        assert icon.styles_for("icon", size=icon.size) == "w-6 h-6"
        assert "icon" not in ButtonComponent.style_definitions()


class TestComponentIdentity:
    """Tests for component_name, uid and auto_id."""

    @pytest.mark.unit
    def test_component_name(self):
        """The Component suffix is dropped and the rest dasherized."""
        assert ButtonComponent().component_name == "button"
        assert IconButtonComponent(icon="x").component_name == "icon-button"

    @pytest.mark.unit
    def test_uid_stable(self):
        """uid is 8 hex characters and stable per instance."""
        button = ButtonComponent()
        assert re.fullmatch(r"[0-9a-f]{8}", button.uid)
        assert button.uid == button.uid
        assert ButtonComponent().uid != button.uid

    @pytest.mark.unit
    def test_auto_id(self):
        """auto_id combines name and uid."""
        button = ButtonComponent()
        assert button.auto_id == f"button-{button.uid}"


class TestComponentStimulus:
    """Tests for Stimulus builders on components."""

    @pytest.mark.unit
    def test_controller_attribute(self):
        """The class-level controller is used."""
        menu = DropdownMenuComponent()
        assert menu.stimulus_controller() == "dropdown-menu"
        assert menu.stimulus_target("menu") == {"data-dropdown-menu-target": "menu"}

    @pytest.mark.unit
    def test_controller_as_option(self):
        """The controller may be an option."""

        class TabsComponent(Component):
            lookup = None
            stimulus = Option(default="tabs")

        assert TabsComponent().stimulus_action("select") == {"data-action": "tabs#select"}
        assert TabsComponent(stimulus="tab-list").stimulus_controller() == "tab-list"

    @pytest.mark.unit
    def test_data_merge(self):
        """Stimulus data from several layers accumulates."""
        menu = DropdownMenuComponent()
        merged = menu.merge_options(
            {"data": {"controller": "dropdown-menu", "action": "click->dropdown-menu#toggle"}},
            {"data": {"controller": "tooltip", "action": "mouseenter->tooltip#show"}},
        )
        assert merged["data"] == {
            "controller": "dropdown-menu tooltip",
            "action": "click->dropdown-menu#toggle mouseenter->tooltip#show",
        }


class TestComponentRegistration:
    """Tests for automatic lookup registration."""

    @pytest.mark.unit
    def test_registered_on_definition(self):
        """*Component subclasses join the default lookup."""
        assert default_lookup.lookup("pom_icon_button") is IconButtonComponent

    @pytest.mark.unit
    def test_custom_lookup(self):
        """Subclasses can register into their own lookup."""
        registry = ComponentLookup()

        class AdminComponent(Component):
            lookup = registry

        class PanelComponent(AdminComponent):
            pass

        assert registry.lookup("pom_panel") is PanelComponent
        assert not default_lookup.is_defined("pom_panel")

    @pytest.mark.unit
    def test_render_by_helper_name(self):
        """The default lookup renders registered components."""
        html = default_lookup.render(
            "pom_button",
            lambda component, content: f"<button class=\"{component.html_attributes()['class']}\">{content}</button>",
            variant="ghost",
            content="Go",
        )
        assert html.startswith('<button class="btn inline-flex items-center text-blue-500')
        assert html.endswith(">Go</button>")


class TestSampleComponent:
    """Tests against the shared sample component fixtures."""

    @pytest.mark.unit
    def test_sample_styles(self, sample_component):
        """Sectioned base, enum and boolean variants resolve together."""
        classes = sample_component.styles_for(padding=sample_component.padding, elevated=sample_component.elevated)
        assert classes == "flex flex-col rounded-lg border p-4 shadow-none"
        assert sample_component.styles_for("header") == "font-semibold text-lg"

    @pytest.mark.unit
    def test_sample_attributes(self, sample_component):
        """Extra options flow into merged attributes."""
        attributes = sample_component.merge_options(
            {"class": "p-4"},
            sample_component.stimulus_value("title", sample_component.title),
            sample_component.extra_options,
        )
        assert attributes == {"class": "p-4", "data-card-title-value": "Welcome", "id": "welcome"}

    @pytest.mark.unit
    def test_sample_not_registered(self, sample_component_class):
        """Components with lookup disabled stay out of the default lookup."""
        assert "SampleCardComponent" not in default_lookup
        assert sample_component_class.required_options() == ["title"]
