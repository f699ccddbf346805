"""JWT token utilities.

Two kinds of tokens pass through this service:

- access tokens, issued by the FAF OAuth server and presented by callers
- claim tokens, issued here to carry pending registrations, password
  resets and Steam links through an email or a redirect
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from faf.config import AuthSettings

KEY_TYPE = "type"


class AccessTokenPayload(BaseModel):
    """Access token payload."""

    user_id: str | None = None  # Absent for client credential tokens
    roles: list[str] = []
    scopes: list[str] = []
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_access_token(token: str, settings: AuthSettings) -> AccessTokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return AccessTokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")


def create_access_token(
    settings: AuthSettings,
    user_id: str | None = None,
    roles: list[str] | None = None,
    scopes: list[str] | None = None,
    lifetime: timedelta = timedelta(hours=1),
) -> str:
    """Create an access token.

    Production access tokens come from the OAuth server; this is used by
    tooling and tests that need to act as a caller.
    """
    payload = {
        "roles": roles or [],
        "scopes": scopes or [],
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    if user_id is not None:
        payload["user_id"] = user_id

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def create_claim_token(
    token_type: str,
    lifetime: timedelta,
    attributes: dict[str, str],
    settings: AuthSettings,
) -> str:
    """Create a signed, typed, expiring claim token.

    Args:
        token_type: Kind discriminator stored in the token
        lifetime: How long the token stays valid
        attributes: Claims to carry
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    payload: dict[str, object] = dict(attributes)
    payload[KEY_TYPE] = token_type
    payload["exp"] = datetime.now(timezone.utc) + lifetime

    return jwt.encode(payload, settings.token_secret, algorithm=settings.jwt_algorithm)


def resolve_claim_token(
    token_type: str, token: str, settings: AuthSettings
) -> dict[str, str]:
    """Verify a claim token and return its attributes.

    Args:
        token_type: Kind the token must have been issued for
        token: Encoded JWT token
        settings: Authentication settings

    Returns:
        The claims passed to create_claim_token

    Raises:
        JWTError: If the token is malformed, tampered with, expired or of
            another type
    """
    try:
        payload = jwt.decode(
            token,
            settings.token_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", KEY_TYPE]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    actual_type = payload.pop(KEY_TYPE)
    if actual_type != token_type:
        raise JWTError(f"Token of type {actual_type} used as {token_type}")

    payload.pop("exp")
    return {key: str(value) for key, value in payload.items()}
