"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env, configures logging from POM_LOG_LEVEL)
- Configuration isolation between tests
- Sample component fixtures
"""

from __future__ import annotations

from typing import Generator

import pytest
from dotenv import load_dotenv

from pom.config import EnvVar, get_environment, reset_configuration
from pom.core.log import setup_logging

# Load environment variables from .env file
load_dotenv()

setup_logging(get_environment(EnvVar.LOG_LEVEL))


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_configuration() -> Generator[None, None, None]:
    """Start and finish every test with configuration rebuilt from the environment."""
    reset_configuration()
    yield
    reset_configuration()


# =============================================================================
# Common Test Fixtures
# =============================================================================


@pytest.fixture
def sample_component_class() -> type:
    """Create a card component type kept out of the default lookup.

    Returns:
        A Component subclass with a required title, an enum-constrained
        padding option, a boolean option and two style groups.
    """
    from pom.component import Component
    from pom.options import Option
    from pom.styles import Styles

    class SampleCardComponent(Component):
        lookup = None
        stimulus = "card"

        title = Option(required=True)
        padding = Option(enums=("none", "sm", "md"), default="md")
        elevated = Option(default=False)

        styles = Styles(
            base={"layout": "flex flex-col", "frame": "rounded-lg border"},
            padding={"none": "p-0", "sm": "p-2", "md": "p-4"},
            elevated={True: "shadow-lg", False: "shadow-none"},
        )
        header_styles = Styles("header", base="font-semibold text-lg")

    return SampleCardComponent


@pytest.fixture
def sample_component(sample_component_class: type):
    """Create a sample card instance with one extra attribute.

    Returns:
        A SampleCardComponent titled "Welcome" with ``id="welcome"``.
    """
    return sample_component_class(title="Welcome", id="welcome")
