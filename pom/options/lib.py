"""Declarative component options.

Components declare typed, validated, defaultable parameters as class
attributes. Declarations are collected into an immutable `OptionRegistry` when
the class is created; every instance holds an `OptionState` built from that
registry and the caller's keyword arguments.

Lifecycle of a registry:
    1. `__init_subclass__` seeds an `OptionRegistryBuilder` with a copy of the
       parent's frozen registry.
    2. The class body's `Option` descriptors are declared on the builder,
       overriding inherited specs of the same name.
    3. The builder is frozen into the class's own `OptionRegistry`.
    Later changes to a parent never leak into subclasses defined earlier, and
    a subclass redefinition never touches its parent.

Example:
    >>> class Badge(Optionable):
    ...     label = Option(required=True)
    ...     size = Option(enums=("sm", "md", "lg"), default="md")
    ...
    ...     def __init__(self, **kwargs):
    ...         self.initialize_options(**kwargs)
    >>> badge = Badge(label="New", size="lg", id="promo")
    >>> badge.size, dict(badge.extra_options)
    ('lg', {'id': 'promo'})
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sized
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from pom.core.log import get_logger

logger = get_logger("pom.options")


class _NoDefault:
    """Sentinel type distinguishing "no default" from a default of None."""

    _instance: ClassVar[_NoDefault | None] = None

    def __new__(cls) -> _NoDefault:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Any = _NoDefault()


# =============================================================================
# Errors
# =============================================================================


class PomError(Exception):
    """Base exception for every error raised by pom."""


class MissingRequiredOption(PomError, ValueError):
    """Raised when a required option without default is not supplied.

    Attributes:
        name: Name of the missing option.
    """

    def __init__(self, name: str):
        super().__init__(f"Missing required option: {name}")
        self.name = name


class InvalidEnumValue(PomError, ValueError):
    """Raised when an enum-constrained option receives a value outside its set.

    Attributes:
        name: Option name.
        value: The rejected value.
        allowed: The allowed values, in declaration order.
    """

    def __init__(self, name: str, value: Any, allowed: tuple[Any, ...]):
        choices = ", ".join(str(item) for item in allowed)
        super().__init__(f"Invalid value for {name}: {value}. Must be one of {choices}")
        self.name = name
        self.value = value
        self.allowed = allowed


# =============================================================================
# Value Helpers
# =============================================================================


def canonical(value: Any) -> Any:
    """Return the canonical comparable form of an option value.

    Enum members collapse to their value; everything else is returned as is.
    """
    if isinstance(value, Enum):
        return value.value
    return value


def is_present(value: Any) -> bool:
    """Truthiness used by option predicates.

    None, False, blank strings and empty collections are not present;
    everything else (including 0) is.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Sized):
        return len(value) > 0
    return True


# =============================================================================
# Specs and Registry
# =============================================================================


@dataclass(frozen=True)
class OptionSpec:
    """Immutable declaration of a single option.

    Attributes:
        name: Option name.
        enums: Allowed values in canonical form, or None when unconstrained.
        default: Static default, zero-argument callable, or NO_DEFAULT.
        required: Whether callers must supply the option.
    """

    name: str
    enums: tuple[Any, ...] | None = None
    default: Any = NO_DEFAULT
    required: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def is_dynamic_default(self) -> bool:
        return self.has_default and callable(self.default)

    @property
    def enforced(self) -> bool:
        """True when construction must fail without this option."""
        return self.required and not self.has_default

    def resolve_default(self) -> Any:
        """Return the default, invoking a default provider on every call."""
        if not self.has_default:
            return None
        if callable(self.default):
            return self.default()
        return self.default

    def normalize(self, value: Any) -> Any:
        """Validate ``value`` against the enum set and coerce it to canonical form.

        Strings and their canonical counterparts are interchangeable: an enum
        declared with ``1`` accepts ``"1"``. None always passes.

        Raises:
            InvalidEnumValue: If the value is outside the allowed set.
        """
        if self.enums is None or value is None:
            return value

        candidate = canonical(value)
        for allowed in self.enums:
            if type(allowed) is type(candidate) and allowed == candidate:
                return allowed
        rendered = str(candidate)
        for allowed in self.enums:
            if str(allowed) == rendered:
                return allowed
        raise InvalidEnumValue(self.name, value, self.enums)

    def to_dict(self) -> dict[str, Any]:
        """Describe the spec as plain data for introspection."""
        return {
            "name": self.name,
            "enums": list(self.enums) if self.enums is not None else None,
            "default": None if not self.has_default or self.is_dynamic_default else canonical(self.default),
            "dynamic_default": self.is_dynamic_default,
            "required": self.required,
            "enforced": self.enforced,
        }


def _normalize_enums(enums: Iterable[Any] | type[Enum] | None) -> tuple[Any, ...] | None:
    if enums is None:
        return None
    return tuple(canonical(item) for item in enums)


class OptionRegistry(Mapping[str, OptionSpec]):
    """Frozen mapping of option name to `OptionSpec` for one component type.

    Example:
        >>> registry = OptionRegistry().inherit().declare("size", default="md").build()
        >>> registry.resolve_default("size")
        'md'
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Mapping[str, OptionSpec] | None = None):
        self._specs: Mapping[str, OptionSpec] = MappingProxyType(dict(specs or {}))

    def __getitem__(self, name: str) -> OptionSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OptionRegistry({list(self._specs)!r})"

    def inherit(self) -> OptionRegistryBuilder:
        """Start a builder seeded with a copy of this registry."""
        return OptionRegistryBuilder(self)

    def resolve_default(self, name: str) -> Any:
        """Default for ``name``, recomputed on every call; None when absent."""
        spec = self._specs.get(name)
        if spec is None:
            return None
        return spec.resolve_default()

    def enum_values_for(self, name: str) -> tuple[Any, ...] | None:
        spec = self._specs.get(name)
        return spec.enums if spec is not None else None

    def required_names(self) -> list[str]:
        """Options that must be supplied at construction."""
        return [name for name, spec in self._specs.items() if spec.enforced]

    def optional_names(self) -> list[str]:
        """Options that may be omitted (including required ones with a default)."""
        return [name for name, spec in self._specs.items() if not spec.enforced]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: spec.to_dict() for name, spec in self._specs.items()}


class OptionRegistryBuilder:
    """Mutable staging area producing a new `OptionRegistry`.

    Seeded with a parent's specs; declarations overwrite by name.
    """

    def __init__(self, parent: OptionRegistry | None = None):
        self._specs: dict[str, OptionSpec] = dict(parent or {})

    def update(self, registry: Mapping[str, OptionSpec]) -> OptionRegistryBuilder:
        """Layer every spec of ``registry`` over the current ones."""
        self._specs.update(registry)
        return self

    def declare(
        self,
        name: str,
        *,
        enums: Iterable[Any] | type[Enum] | None = None,
        default: Any = NO_DEFAULT,
        required: bool = False,
    ) -> OptionRegistryBuilder:
        """Register or overwrite the spec for ``name``."""
        self._specs[name] = OptionSpec(
            name=name,
            enums=_normalize_enums(enums),
            default=default,
            required=required,
        )
        return self

    def build(self) -> OptionRegistry:
        return OptionRegistry(self._specs)


# =============================================================================
# Per-instance State
# =============================================================================


class OptionState:
    """Runtime option values of one component instance.

    Stores only explicitly assigned values; reads fall back to the registry
    default. An explicit None reads as the default, the same as unset.

    Attributes:
        registry: The registry the state validates against.
        extra_options: Read-only view of inputs that match no declared option,
            in input order.
    """

    def __init__(self, registry: OptionRegistry, inputs: Mapping[str, Any] | None = None):
        self.registry = registry
        self._values: dict[str, Any] = {}
        self._extra: dict[str, Any] = {}
        self.extra_options: Mapping[str, Any] = MappingProxyType(self._extra)
        self._initialize({str(key): value for key, value in (inputs or {}).items()})

    def _initialize(self, inputs: dict[str, Any]) -> None:
        for name in self.registry.required_names():
            if name not in inputs:
                raise MissingRequiredOption(name)

        for name, value in inputs.items():
            if name in self.registry:
                self.set(name, value)
            else:
                self._extra[name] = value

        for name, spec in self.registry.items():
            if name in inputs or not spec.has_default or spec.is_dynamic_default:
                continue
            self.set(name, spec.default)

    def _spec(self, name: str) -> OptionSpec:
        try:
            return self.registry[name]
        except KeyError:
            raise KeyError(f"Unknown option: {name}") from None

    def get(self, name: str) -> Any:
        """Explicit value if not None, else the (recomputed) default, else None.

        Default providers are not checked against the enum set; their result
        is returned as is.
        """
        spec = self._spec(name)
        value = self._values.get(name)
        if value is not None:
            return value
        return spec.resolve_default()

    def set(self, name: str, value: Any) -> None:
        """Validate and store an explicit value.

        Raises:
            KeyError: If ``name`` is not a declared option.
            InvalidEnumValue: If the value violates the enum constraint.
        """
        self._values[name] = self._spec(name).normalize(value)

    def is_set(self, name: str) -> bool:
        return self._values.get(name) is not None

    def reset_to_default(self, name: str) -> None:
        """Drop the explicit value; unknown names are ignored."""
        self._values.pop(name, None)

    def present(self, name: str) -> bool:
        return is_present(self.get(name))

    def values(self) -> dict[str, Any]:
        """Snapshot of every declared option's current value."""
        return {name: self.get(name) for name in self.registry}


# =============================================================================
# Declaration DSL
# =============================================================================


class Option:
    """Class-body declaration of an option, acting as its accessor.

    Reading the attribute on an instance returns the current value; assigning
    runs the validating setter.

    Example:
        >>> class Alert(Optionable):
        ...     variant = Option(enums=("info", "danger"), default="info")
    """

    def __init__(
        self,
        enums: Iterable[Any] | type[Enum] | None = None,
        *,
        default: Any = NO_DEFAULT,
        required: bool = False,
    ):
        self.enums = enums
        self.default = default
        self.required = required
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        state = instance._option_state
        if self.name not in state.registry:
            raise AttributeError(f"{type(instance).__name__!r} has no option {self.name!r}")
        return state.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        instance._option_state.set(self.name, value)

    def __repr__(self) -> str:
        return f"Option({self.name!r})"


class Optionable:
    """Mixin giving a class an option registry and per-instance option state.

    Subclasses call `initialize_options(**kwargs)` from ``__init__``.
    """

    _option_registry: ClassVar[OptionRegistry] = OptionRegistry()
    _option_state: OptionState

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        builder = OptionRegistryBuilder()
        for base in reversed(cls.__bases__):
            inherited = getattr(base, "_option_registry", None)
            if inherited is not None:
                builder.update(inherited)

        for attr, value in list(cls.__dict__.items()):
            if isinstance(value, Option):
                builder.declare(
                    value.name or attr,
                    enums=value.enums,
                    default=value.default,
                    required=value.required,
                )
                logger.debug("Declared option %s.%s", cls.__name__, value.name or attr)

        cls._option_registry = builder.build()

    # -------------------------------------------------------------------------
    # Class-level DSL and introspection
    # -------------------------------------------------------------------------

    @classmethod
    def option(
        cls,
        name: str,
        enums: Iterable[Any] | type[Enum] | None = None,
        *,
        default: Any = NO_DEFAULT,
        required: bool = False,
    ) -> Option:
        """Declare (or redeclare) an option after the class body.

        Only this class's registry changes; subclasses created earlier keep
        their own snapshot.
        """
        descriptor = Option(enums, default=default, required=required)
        descriptor.__set_name__(cls, name)
        setattr(cls, name, descriptor)
        cls._option_registry = (
            cls._option_registry.inherit()
            .declare(name, enums=enums, default=default, required=required)
            .build()
        )
        logger.debug("Declared option %s.%s", cls.__name__, name)
        return descriptor

    @classmethod
    def options(cls) -> OptionRegistry:
        return cls._option_registry

    @classmethod
    def enum_values_for(cls, name: str) -> tuple[Any, ...] | None:
        return cls._option_registry.enum_values_for(name)

    @classmethod
    def default_value_for(cls, name: str) -> Any:
        return cls._option_registry.resolve_default(name)

    @classmethod
    def required_options(cls) -> list[str]:
        return cls._option_registry.required_names()

    @classmethod
    def optional_options(cls) -> list[str]:
        return cls._option_registry.optional_names()

    # -------------------------------------------------------------------------
    # Instance surface
    # -------------------------------------------------------------------------

    def initialize_options(self, inputs: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """Validate inputs, assign values and defaults, capture extra options.

        Raises:
            MissingRequiredOption: If a required option without default is absent.
            InvalidEnumValue: If a supplied or default value violates its enum.
        """
        self._option_state = OptionState(type(self)._option_registry, {**(inputs or {}), **kwargs})

    @property
    def extra_options(self) -> Mapping[str, Any]:
        return self._option_state.extra_options

    def option_values(self) -> dict[str, Any]:
        return self._option_state.values()

    def option_set(self, name: str) -> bool:
        """True when ``name`` holds an explicit (or initialization default) value."""
        if name not in self._option_state.registry:
            return False
        return self._option_state.is_set(name)

    def reset_option(self, name: str) -> None:
        self._option_state.reset_to_default(name)

    def option_present(self, name: str) -> bool:
        return self._option_state.present(name)
