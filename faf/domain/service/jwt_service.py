"""Access token domain service."""

import logfire

from faf.config import AuthSettings
from faf.domain.value import OAuthScope, Role
from faf.util.jwt import AccessTokenPayload, JWTError, verify_access_token

from .base import Service


class JWTService(Service):
    """Verifies the access tokens the FAF OAuth server issues to callers.

    Tokens are never issued here. A token bound to a player carries
    ``user_id``; client credential tokens, such as the one of the
    registration client, carry only scopes.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> AccessTokenPayload:
        """Verify an access token and extract its payload.

        Raises:
            JWTError: If the token is malformed, expired or badly signed
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_access_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Access token rejected", error=str(e))
                raise

            logfire.debug(
                "Access token verified",
                user_id=payload.user_id,
                roles=payload.roles,
                scopes=payload.scopes,
            )
            return payload

    @staticmethod
    def has_scope(payload: AccessTokenPayload, scope: OAuthScope) -> bool:
        return scope.value in payload.scopes

    @staticmethod
    def has_any_role(payload: AccessTokenPayload, roles: tuple[Role, ...]) -> bool:
        """Whether the token holds at least one of ``roles``."""
        return any(role.value in payload.roles for role in roles)
