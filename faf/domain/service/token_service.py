"""Claim token domain service."""

from datetime import timedelta

import logfire

from faf.config import AuthSettings
from faf.domain.error import ApiError, ErrorCode
from faf.domain.value import TokenType
from faf.util.jwt import JWTError, create_claim_token, resolve_claim_token

from .base import Service


class TokenService(Service):
    """Issues and resolves signed claim tokens.

    Claim tokens stand in for server-side pending state: a registration
    request, a password reset or a Steam link in progress lives only inside
    the token until it is redeemed or expires.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, token_type: TokenType, lifetime: timedelta, attributes: dict[str, str]
    ) -> str:
        """Create a token of the given type.

        Args:
            token_type: Purpose of the token
            lifetime: Validity period
            attributes: Claims to carry

        Returns:
            Encoded token
        """
        with logfire.span("token_service.create_token", token_type=token_type.value):
            token = create_claim_token(
                token_type.value, lifetime, attributes, self.auth_settings
            )
            logfire.info(
                "Token created",
                token_type=token_type.value,
                lifetime_seconds=lifetime.total_seconds(),
            )
            return token

    def resolve_token(self, token_type: TokenType, token: str) -> dict[str, str]:
        """Verify a token and return its claims.

        Args:
            token_type: Purpose the token must have been issued for
            token: Encoded token

        Returns:
            Token claims

        Raises:
            ApiError: TOKEN_INVALID if the token is malformed, expired,
                tampered with or of another type
        """
        with logfire.span("token_service.resolve_token", token_type=token_type.value):
            try:
                return resolve_claim_token(token_type.value, token, self.auth_settings)
            except JWTError as e:
                logfire.warn(
                    "Token rejected", token_type=token_type.value, error=str(e)
                )
                raise ApiError.of(ErrorCode.TOKEN_INVALID)
