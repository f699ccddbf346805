"""Unit tests for TokenService."""

from datetime import timedelta

import pytest

from faf.config import AuthSettings
from faf.domain.error import ApiError, ErrorCode
from faf.domain.service import TokenService
from faf.domain.value import TokenType


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(AuthSettings(token_secret="unit-test-secret"))


class TestTokenService:
    """Tests for claim token round trips and rejection."""

    def test_resolve_returns_attributes(self, token_service):
        """Should return exactly the claims the token was created with."""
        # Arrange
        token = token_service.create_token(
            TokenType.REGISTRATION,
            timedelta(minutes=5),
            {"username": "Player1", "email": "p1@example.com"},
        )

        # Act
        claims = token_service.resolve_token(TokenType.REGISTRATION, token)

        # Assert
        assert claims == {"username": "Player1", "email": "p1@example.com"}

    def test_rejects_other_token_type(self, token_service):
        """Should not accept a password reset token as a Steam link token."""
        # Arrange
        token = token_service.create_token(
            TokenType.PASSWORD_RESET, timedelta(minutes=5), {"id": "42"}
        )

        # Act & Assert
        with pytest.raises(ApiError) as exc_info:
            token_service.resolve_token(TokenType.LINK_TO_STEAM, token)

        assert exc_info.value.has_code(ErrorCode.TOKEN_INVALID)

    def test_rejects_expired_token(self, token_service):
        """Should reject a token past its deadline."""
        # Arrange
        token = token_service.create_token(
            TokenType.REGISTRATION, timedelta(seconds=-1), {"username": "Player1"}
        )

        # Act & Assert
        with pytest.raises(ApiError) as exc_info:
            token_service.resolve_token(TokenType.REGISTRATION, token)

        assert exc_info.value.has_code(ErrorCode.TOKEN_INVALID)

    def test_rejects_token_signed_with_other_secret(self, token_service):
        """Should reject tokens not signed with the configured secret."""
        # Arrange
        foreign = TokenService(AuthSettings(token_secret="someone-else"))
        token = foreign.create_token(
            TokenType.REGISTRATION, timedelta(minutes=5), {"username": "Player1"}
        )

        # Act & Assert
        with pytest.raises(ApiError) as exc_info:
            token_service.resolve_token(TokenType.REGISTRATION, token)

        assert exc_info.value.has_code(ErrorCode.TOKEN_INVALID)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_rejects_malformed_token(self, token_service, token):
        """Should reject strings that are not tokens at all."""
        with pytest.raises(ApiError) as exc_info:
            token_service.resolve_token(TokenType.REGISTRATION, token)

        assert exc_info.value.has_code(ErrorCode.TOKEN_INVALID)
