"""Dependency injection for the account service.

Core providers are always used as is. Mail, persistence and Steam are
components whose mock implementations live in tests/di.
"""

from faf.util.di.application import ProdApplicationProvider
from faf.util.di.base import Component, ProviderBase, select_provider
from faf.util.di.core import ProdConfigProvider
from faf.util.di.domain import ProdDomainProvider
from faf.util.di.infrastructure import (
    MailProvider,
    PersistenceProvider,
    SteamProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    MailProvider,
    SteamProvider,
    PersistenceProvider,
]

COMPONENTS: frozenset[Component] = frozenset(
    base.__mock_component__ for base in PROVIDERS if base.__mock_component__
)

__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "select_provider",
]
