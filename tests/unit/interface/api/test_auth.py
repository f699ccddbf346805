"""Unit tests for route authentication helpers."""

from datetime import timedelta

import pytest
from starlette.requests import Request

from faf.domain.service import JWTService
from faf.domain.value import OAuthScope, Role
from faf.interface.api.auth import authenticate, client_ip, require_user_id
from faf.interface.error import AccessDeniedError, AuthenticationError
from tests.harness import create_env_fixture, make_access_token

# Unit test fixture
unit_env = create_env_fixture()


def build_request(
    headers: dict[str, str] | None = None, client: tuple[str, int] | None = None
) -> Request:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/users/changePassword",
        "headers": [
            (key.lower().encode(), value.encode())
            for key, value in (headers or {}).items()
        ],
        "client": client,
    }
    return Request(scope)


def bearer_request(token: str) -> Request:
    return build_request({"Authorization": f"Bearer {token}"})


class TestAuthenticate:
    """Tests for authenticate()."""

    @pytest.mark.asyncio
    async def test_missing_header(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(AuthenticationError):
            authenticate(build_request(), jwt_service)

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        token = make_access_token(user_id="u1", lifetime=timedelta(hours=-1))

        with pytest.raises(AuthenticationError):
            authenticate(bearer_request(token), jwt_service)

    @pytest.mark.asyncio
    async def test_missing_scope(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        token = make_access_token(user_id="u1", roles=[Role.USER])

        with pytest.raises(AccessDeniedError):
            authenticate(
                bearer_request(token),
                jwt_service,
                scope=OAuthScope.WRITE_ACCOUNT_DATA,
            )

    @pytest.mark.asyncio
    async def test_requires_any_of_roles(self, unit_env):
        """A moderator token passes a moderator-or-administrator policy."""
        # Arrange
        jwt_service = await unit_env.get(JWTService)
        moderator = make_access_token(
            user_id="m1",
            roles=[Role.USER, Role.MODERATOR],
            scopes=[OAuthScope.WRITE_ACCOUNT_DATA],
        )
        user = make_access_token(
            user_id="u1", roles=[Role.USER], scopes=[OAuthScope.WRITE_ACCOUNT_DATA]
        )
        policy = (Role.MODERATOR, Role.ADMINISTRATOR)

        # Act
        payload = authenticate(
            bearer_request(moderator),
            jwt_service,
            scope=OAuthScope.WRITE_ACCOUNT_DATA,
            any_role=policy,
        )

        # Assert
        assert payload.user_id == "m1"
        with pytest.raises(AccessDeniedError):
            authenticate(
                bearer_request(user),
                jwt_service,
                scope=OAuthScope.WRITE_ACCOUNT_DATA,
                any_role=policy,
            )

    @pytest.mark.asyncio
    async def test_client_credentials_token_has_no_user(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        token = make_access_token(scopes=[OAuthScope.CREATE_USER])

        payload = authenticate(
            bearer_request(token), jwt_service, scope=OAuthScope.CREATE_USER
        )

        with pytest.raises(AccessDeniedError):
            require_user_id(payload)


class TestClientIp:
    """Tests for client_ip()."""

    def test_prefers_forwarded_for(self):
        request = build_request(
            {"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}, client=("10.0.0.2", 4000)
        )

        assert client_ip(request) == "203.0.113.7"

    def test_falls_back_to_peer(self):
        assert client_ip(build_request(client=("10.0.0.2", 4000))) == "10.0.0.2"

    def test_unknown_peer(self):
        assert client_ip(build_request()) is None
