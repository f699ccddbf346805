"""Test harness for unit, integration and E2E tests.

Integration runs assume a PostgreSQL database reachable at DATABASE__URL
with migrations applied (`python scripts/run_migrations.py`).
"""

import re
from datetime import timedelta

import pytest_asyncio

from faf.config import Settings
from faf.domain.value import OAuthScope, Role
from faf.util.di import Component
from faf.util.jwt import create_access_token
from tests.di import build_test_container

TOKEN_PATTERN = re.compile(r"token=([^\s&]+)")


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register(unit_env):
            user_service = await unit_env.get(UserService)
            await user_service.register("Player1", "p1@example.com")
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def token_from_mail(body: str) -> str:
    """Extract the token of the link in an activation or reset mail."""
    match = TOKEN_PATTERN.search(body)
    assert match, f"No token link in mail: {body!r}"
    return match.group(1)


def make_access_token(
    user_id: str | None = None,
    roles: list[Role] | None = None,
    scopes: list[OAuthScope] | None = None,
    lifetime: timedelta = timedelta(hours=1),
) -> str:
    """Sign an access token the way the OAuth server would.

    Args:
        user_id: Subject user, None for a client credentials token
        roles: Granted roles
        scopes: Granted scopes
        lifetime: Validity period, negative for an expired token

    Returns:
        Encoded access token
    """
    return create_access_token(
        Settings().auth,
        user_id=user_id,
        roles=[role.value for role in roles or []],
        scopes=[scope.value for scope in scopes or []],
        lifetime=lifetime,
    )


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}
