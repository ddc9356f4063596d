"""Component base class.

`Component` combines the option DSL, style groups, attribute merging and the
Stimulus builders. Subclasses whose name ends with ``Component`` register
themselves with the default lookup so they can be rendered by helper name.

Example:
    >>> class ButtonComponent(Component):
    ...     variant = Option(enums=("solid", "outline"), default="solid")
    ...     disabled = Option(default=False)
    ...     styles = Styles(
    ...         base="btn",
    ...         variant={"solid": "bg-blue-500 text-white", "outline": "border"},
    ...         disabled={True: "opacity-50", False: "cursor-pointer"},
    ...     )
    ...
    ...     def html_attributes(self):
    ...         classes = self.styles_for(variant=self.variant, disabled=self.disabled)
    ...         return self.merge_options({"class": classes, "id": self.auto_id}, self.extra_options)
    >>> ButtonComponent(variant="outline", **{"class": "mt-2"}).html_attributes()["class"]
    'btn border cursor-pointer mt-2'
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Mapping
from typing import Any, ClassVar

from pom.attributes import merge_options
from pom.core.log import get_logger
from pom.lookup import COMPONENT_SUFFIX, ComponentLookup, default_lookup
from pom.options import Optionable
from pom.stimulus import StimulusHelpers, dasherize
from pom.styles import Styleable

logger = get_logger("pom.component")


class Component(Optionable, Styleable, StimulusHelpers):
    """Base class for declarative UI components.

    Keyword arguments matching declared options set them; the rest are kept
    in `extra_options`, typically merged into the rendered attributes.

    Attributes:
        lookup: Registry that ``*Component`` subclasses join on definition;
            set to None on a subclass to opt its descendants out.
        stimulus: Optional Stimulus controller name used by the builders.
    """

    lookup: ClassVar[ComponentLookup | None] = default_lookup

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.lookup is not None and cls.__name__.endswith(COMPONENT_SUFFIX):
            cls.lookup.register(cls)

    def __init__(self, options: Mapping[str, Any] | None = None, /, **kwargs: Any):
        self.initialize_options(options, **kwargs)
        self._uid: str | None = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.option_values()!r}>"

    @property
    def component_name(self) -> str:
        """Class name without the ``Component`` suffix, dasherized."""
        name = re.sub(f"{COMPONENT_SUFFIX}$", "", type(self).__name__)
        return dasherize(name)

    @property
    def uid(self) -> str:
        """Random 8-character hex id, stable for the instance."""
        if self._uid is None:
            self._uid = secrets.token_hex(4)
        return self._uid

    @property
    def auto_id(self) -> str:
        """``<component_name>-<uid>``, skipping blank parts."""
        return "-".join(part for part in (self.component_name, self.uid) if part)

    def merge_options(self, *maps: Mapping[str, Any] | None) -> dict[str, Any]:
        """Merge attribute maps; see `pom.attributes.merge_options`."""
        return merge_options(*maps)
