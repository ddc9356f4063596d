"""Style composition for components.

A component type maps style *groups* (one per rendered element, ``"default"``
unless named) to style *rules* keyed by option name, plus the special ``base``
key that always applies:

    >>> class Button(Styleable):
    ...     styles = Styles(
    ...         base="btn",
    ...         variant={"solid": "bg-blue-500 text-white", "outline": "border"},
    ...         disabled={True: "opacity-50", False: "cursor-pointer"},
    ...     )
    >>> Button().styles_for(variant="solid", disabled=True)
    'btn bg-blue-500 text-white opacity-50'

A rule is one of:
    - a string, used as is;
    - a mapping, either selecting a variant by the current option value or,
      under ``base``, grouping named sections that are all applied;
    - a callable, invoked with the resolution values it declares as
      parameters, its result converted to a string.

Definitions merge across the class hierarchy ancestor-first. When a parent and
a child both define a key as a mapping, the mappings merge; otherwise the
child's rule replaces the parent's.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from pom.config import get_conflict_resolver
from pom.conflict import ClassConflictResolver
from pom.core.log import get_logger
from pom.options import canonical

logger = get_logger("pom.styles")

DEFAULT_GROUP = "default"
BASE_KEY = "base"

# Bumped whenever any type's own definitions change; effective definitions
# cached under an older generation are rebuilt.
_generation = 0


def _bump_generation() -> None:
    global _generation
    _generation += 1


# =============================================================================
# Registry
# =============================================================================


def merge_style_maps(existing: Mapping[str, Any], styles: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``styles`` over ``existing`` key by key.

    Nested mappings on both sides merge (``styles`` wins per sub-key); any
    other combination replaces the existing rule.
    """
    merged = dict(existing)
    for key, rule in styles.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(rule, Mapping):
            merged[key] = {**current, **rule}
        else:
            merged[key] = rule
    return merged


class StyleRegistry(Mapping[str, Mapping[str, Any]]):
    """Group name to style map, for one component type or a merged hierarchy.

    Groups are exposed read-only; use `define_group` to add definitions.
    """

    def __init__(self, groups: Mapping[str, Mapping[str, Any]] | None = None):
        self._groups: dict[str, dict[str, Any]] = {}
        for group, styles in (groups or {}).items():
            self.define_group(group, styles)

    def __getitem__(self, group: str) -> Mapping[str, Any]:
        return MappingProxyType(self._groups[group])

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"StyleRegistry({list(self._groups)!r})"

    def define_group(self, group: str, styles: Mapping[str, Any]) -> None:
        """Merge ``styles`` into ``group`` using the style map merge rule."""
        self._groups[group] = merge_style_maps(self._groups.get(group, {}), styles)

    def merged(self, child: StyleRegistry) -> StyleRegistry:
        """New registry with ``child``'s groups layered over this one's."""
        result = StyleRegistry(self._groups)
        for group, styles in child._groups.items():
            result.define_group(group, styles)
        return result

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {group: dict(styles) for group, styles in self._groups.items()}


# =============================================================================
# Resolution
# =============================================================================


def _call_rule(rule: Callable[..., Any], values: Mapping[str, Any]) -> Any:
    """Call ``rule`` with the subset of ``values`` its signature accepts."""
    try:
        signature = inspect.signature(rule)
    except (TypeError, ValueError):
        return rule(**values)

    parameters = signature.parameters.values()
    if any(param.kind is inspect.Parameter.VAR_KEYWORD for param in parameters):
        return rule(**values)

    accepted = {
        param.name
        for param in parameters
        if param.kind in (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
    }
    return rule(**{name: value for name, value in values.items() if name in accepted})


def resolve_rule(rule: Any, values: Mapping[str, Any]) -> str:
    """Resolve a rule to a class string; mappings resolve every sub-rule."""
    if rule is None:
        return ""
    if isinstance(rule, str):
        return rule
    if isinstance(rule, Mapping):
        parts = (resolve_rule(sub_rule, values) for sub_rule in rule.values())
        return " ".join(part for part in parts if part)
    if isinstance(rule, (list, tuple)):
        parts = (resolve_rule(sub_rule, values) for sub_rule in rule)
        return " ".join(part for part in parts if part)
    if callable(rule):
        result = _call_rule(rule, values)
        return "" if result is None else str(result)
    return str(rule)


def select_variant(rule: Mapping[Any, Any], value: Any) -> Any:
    """Pick the sub-rule for ``value`` from a variant mapping.

    Booleans only ever match the ``True``/``False`` keys. Other values match
    a non-boolean key by canonical form first, then by string rendering.
    Returns None when nothing matches.
    """
    if isinstance(value, bool):
        for key, sub_rule in rule.items():
            if key is value:
                return sub_rule
        return None

    candidate = canonical(value)
    keys = [(key, sub_rule) for key, sub_rule in rule.items() if not isinstance(key, bool)]
    for key, sub_rule in keys:
        if canonical(key) == candidate:
            return sub_rule
    rendered = str(candidate)
    for key, sub_rule in keys:
        if str(canonical(key)) == rendered:
            return sub_rule
    return None


class StyleResolver:
    """Compute class strings from a style registry and option values.

    Args:
        definitions: Effective style registry to resolve against.
        conflict_resolver: Resolver used for the final merge; defaults to the
            configured one at call time.

    Example:
        >>> resolver = StyleResolver(StyleRegistry({"default": {"base": "p-4", "size": {"lg": "p-8"}}}))
        >>> resolver.resolve("default", {"size": "lg"})
        'p-8'
    """

    def __init__(
        self,
        definitions: Mapping[str, Mapping[str, Any]],
        conflict_resolver: ClassConflictResolver | None = None,
    ):
        self.definitions = definitions
        self.conflict_resolver = conflict_resolver

    def fragments(self, group: str, values: Mapping[str, Any]) -> list[str]:
        """Non-empty class fragments for ``group``, base first."""
        styles = self.definitions.get(group)
        if not styles:
            return []

        fragments = [resolve_rule(styles.get(BASE_KEY), values)]
        for key, rule in styles.items():
            if key == BASE_KEY or key not in values:
                continue
            value = values[key]
            if value is None:
                continue
            if isinstance(rule, Mapping):
                rule = select_variant(rule, value)
            fragments.append(resolve_rule(rule, values))
        return [fragment for fragment in fragments if fragment]

    def resolve(self, group: str = DEFAULT_GROUP, values: Mapping[str, Any] | None = None) -> str:
        """Resolve ``group`` to a conflict-free class string.

        Only style keys present in ``values`` with a non-None value apply;
        ``base`` always applies. Undefined groups resolve to "".
        """
        joined = " ".join(self.fragments(group, values or {}))
        if not joined:
            return ""
        resolver = self.conflict_resolver or get_conflict_resolver()
        return resolver.merge(joined)


# =============================================================================
# Declaration DSL
# =============================================================================


def _split_group(group: Any, styles: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    if isinstance(group, Mapping):
        return DEFAULT_GROUP, {**group, **styles}
    return str(group), styles


class Styles:
    """Class-body declaration of a style group.

    Example:
        >>> class Card(Styleable):
        ...     styles = Styles(base="rounded border")
        ...     header_styles = Styles("header", base="px-4 py-2 font-semibold")
    """

    def __init__(self, group: Any = DEFAULT_GROUP, /, **styles: Any):
        self.group, self.styles = _split_group(group, styles)

    def __repr__(self) -> str:
        return f"Styles({self.group!r}, {sorted(self.styles)!r})"


class Styleable:
    """Mixin giving a class inheritable style groups and `styles_for`."""

    _style_registry: ClassVar[StyleRegistry] = StyleRegistry()
    _style_cache: ClassVar[tuple[int, StyleRegistry] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._style_registry = StyleRegistry()
        cls._style_cache = None
        for value in list(cls.__dict__.values()):
            if isinstance(value, Styles):
                cls._style_registry.define_group(value.group, value.styles)
                logger.debug("Defined styles %s[%s]", cls.__name__, value.group)
        _bump_generation()

    @classmethod
    def define_styles(cls, group: Any = DEFAULT_GROUP, /, **styles: Any) -> None:
        """Merge style definitions into this class's own ``group``.

        A mapping may be passed in place of the group name to target the
        default group.
        """
        group, styles = _split_group(group, styles)
        cls._style_registry.define_group(group, styles)
        _bump_generation()
        logger.debug("Defined styles %s[%s]: %s", cls.__name__, group, sorted(styles))

    @classmethod
    def style_definitions(cls) -> StyleRegistry:
        """Effective definitions merged ancestor-first along the MRO.

        The returned registry is shared until definitions change; do not
        modify it.
        """
        cached = cls.__dict__.get("_style_cache")
        if cached is not None and cached[0] == _generation:
            return cached[1]

        effective = StyleRegistry()
        for klass in reversed(cls.__mro__):
            own = klass.__dict__.get("_style_registry")
            if own is not None:
                effective = effective.merged(own)
        cls._style_cache = (_generation, effective)
        return effective

    def styles_for(self, group: Any = DEFAULT_GROUP, /, **values: Any) -> str:
        """Resolve one style group against ``values``.

        Example:
            >>> button.styles_for(variant="solid")
            >>> button.styles_for("icon", size=button.size)
        """
        group, values = _split_group(group, values)
        return StyleResolver(type(self).style_definitions()).resolve(group, values)
