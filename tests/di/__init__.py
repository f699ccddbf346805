"""Mock providers for testing."""

from .mail import MockMailProvider
from .steam import MockSteamProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockSteamProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
