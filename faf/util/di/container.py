"""Container construction and FastAPI wiring."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from faf.util.di import PROVIDERS, Component, select_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the container, using mock providers for the given components.

    The mock providers must have been imported before; production passes
    no components and only needs the production providers.
    """
    providers = [
        select_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Resolve ``FromDishka`` route parameters from the container."""
    setup_dishka(container, app)
