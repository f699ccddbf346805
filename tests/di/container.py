"""Test container with selective unmocking."""

from dishka import AsyncContainer

from faf.util.di import COMPONENTS, Component
from faf.util.di.container import create_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Settings are loaded from environment variables; tests/conftest.py sets
    the test defaults.

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, needs DATABASE__URL
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If unmock names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return create_container(mocked=COMPONENTS - unmock)
