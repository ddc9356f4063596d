"""pom: declarative UI components with typed options and composable styles."""

from pom.attributes import merge_options
from pom.component import Component
from pom.config import configure, get_configuration, reset_configuration
from pom.conflict import ClassConflictResolver, TailwindClassResolver
from pom.lookup import ComponentLookup, Renderer, UndefinedComponentType, default_lookup
from pom.options import NO_DEFAULT, InvalidEnumValue, MissingRequiredOption, Option, PomError
from pom.stimulus import BlankIdentifier, InvalidStimulusAction, MissingStimulusController
from pom.styles import StyleRegistry, StyleResolver, Styles

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Components
    "Component",
    "Option",
    "Styles",
    "NO_DEFAULT",
    # Resolution
    "StyleRegistry",
    "StyleResolver",
    "merge_options",
    "ClassConflictResolver",
    "TailwindClassResolver",
    # Lookup
    "ComponentLookup",
    "Renderer",
    "default_lookup",
    # Configuration
    "configure",
    "get_configuration",
    "reset_configuration",
    # Errors
    "PomError",
    "MissingRequiredOption",
    "InvalidEnumValue",
    "BlankIdentifier",
    "MissingStimulusController",
    "InvalidStimulusAction",
    "UndefinedComponentType",
]
