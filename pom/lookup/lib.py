"""Helper-name based component lookup.

Views refer to components by helper names such as ``pom_user_profile_card``.
A helper name is a configured prefix, an underscore and the snake_case
component name; it resolves to the class registered as
``UserProfileCardComponent``.

Classes are registered explicitly (`ComponentLookup.register`, usable as a
decorator), in bulk from a module (`ComponentLookup.discover`), or
automatically when a ``Component`` subclass named ``*Component`` is defined.

Example:
    >>> lookup = ComponentLookup()
    >>> @lookup.register
    ... class BadgeComponent(Component):
    ...     pass
    >>> lookup.lookup("pom_badge") is BadgeComponent
    True
"""

from __future__ import annotations

import importlib
from collections.abc import Iterable, Iterator
from types import ModuleType
from typing import Any, Protocol, TypeVar, runtime_checkable

from pom.config import get_configuration
from pom.core.log import get_logger
from pom.options import PomError

logger = get_logger("pom.lookup")

COMPONENT_SUFFIX = "Component"

T = TypeVar("T", bound=type)


class UndefinedComponentType(PomError, LookupError):
    """Raised when a helper name matches no registered component class.

    Attributes:
        class_name: The class name the helper name resolved to.
    """

    def __init__(self, class_name: str):
        super().__init__(f"Component class '{class_name}' is not defined")
        self.class_name = class_name


@runtime_checkable
class Renderer(Protocol):
    """Turns a component instance and optional child content into markup."""

    def __call__(self, component: Any, content: Any = None) -> Any: ...


def camelize(name: str) -> str:
    """``user_profile_card`` -> ``UserProfileCard``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


class ComponentLookup:
    """Registry from component class name to component class.

    Args:
        prefixes: Helper-name prefixes to recognize. When omitted, the
            configured ``component_prefixes`` are read on every call.
    """

    def __init__(self, prefixes: Iterable[str] | None = None):
        self._classes: dict[str, type] = {}
        self._prefixes = list(prefixes) if prefixes is not None else None

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    @property
    def prefixes(self) -> list[str]:
        if self._prefixes is not None:
            return list(self._prefixes)
        return list(get_configuration().component_prefixes)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, cls: T, name: str | None = None) -> T:
        """Register ``cls`` under ``name`` (its class name by default).

        Returns the class so the method works as a decorator.
        """
        key = name or cls.__name__
        previous = self._classes.get(key)
        if previous is not None and previous is not cls:
            logger.debug("Replacing component %s (%s.%s)", key, previous.__module__, previous.__qualname__)
        self._classes[key] = cls
        logger.debug("Registered component %s", key)
        return cls

    def unregister(self, name: str) -> None:
        """Forget a class name; unknown names are ignored."""
        self._classes.pop(name, None)

    def discover(self, module: ModuleType | str) -> list[type]:
        """Register every ``*Component`` class defined in ``module``.

        Args:
            module: Module object or importable dotted name.

        Returns:
            The classes registered, in definition order.
        """
        if isinstance(module, str):
            module = importlib.import_module(module)

        found = [
            value
            for value in vars(module).values()
            if isinstance(value, type)
            and value.__module__ == module.__name__
            and value.__name__.endswith(COMPONENT_SUFFIX)
        ]
        for cls in found:
            self.register(cls)
        logger.info("Discovered %d component(s) in %s", len(found), module.__name__)
        return found

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def strip_prefix(self, helper_name: str) -> str | None:
        """Component part of ``helper_name``, or None without a known prefix."""
        for prefix in sorted(self.prefixes, key=len, reverse=True):
            marker = f"{prefix}_"
            if helper_name.startswith(marker) and len(helper_name) > len(marker):
                return helper_name[len(marker) :]
        return None

    def is_helper_name(self, name: str) -> bool:
        return self.strip_prefix(name) is not None

    def class_name_for(self, helper_name: str) -> str:
        """Class name a helper name resolves to.

        Example:
            >>> ComponentLookup(["pom"]).class_name_for("pom_user_profile_card")
            'UserProfileCardComponent'
        """
        component = self.strip_prefix(helper_name)
        if component is None:
            component = helper_name
        return f"{camelize(component)}{COMPONENT_SUFFIX}"

    def lookup(self, helper_name: str) -> type:
        """Resolve a helper name to its registered class.

        Raises:
            UndefinedComponentType: If the name has no recognized prefix or no
                class is registered under the resolved name.
        """
        class_name = self.class_name_for(helper_name)
        if not self.is_helper_name(helper_name) or class_name not in self._classes:
            raise UndefinedComponentType(class_name)
        return self._classes[class_name]

    def is_defined(self, helper_name: str) -> bool:
        try:
            self.lookup(helper_name)
        except UndefinedComponentType:
            return False
        return True

    def render(
        self,
        helper_name: str,
        renderer: Renderer,
        *args: Any,
        content: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Instantiate the named component and hand it to ``renderer``.

        Args:
            helper_name: Prefixed snake_case name (``pom_button``).
            renderer: Callable producing markup from the component and content.
            *args: Positional arguments for the component constructor.
            content: Child content passed through to the renderer.
            **kwargs: Keyword arguments for the component constructor.

        Returns:
            Whatever the renderer returns.
        """
        component_class = self.lookup(helper_name)
        component = component_class(*args, **kwargs)
        logger.debug("Rendering %s via %s", component_class.__name__, helper_name)
        return renderer(component, content)


default_lookup = ComponentLookup()
