"""Caller authentication and authorization for API routes."""

from fastapi import Request

from faf.domain.service import JWTService
from faf.domain.value import OAuthScope, Role
from faf.interface.error import AccessDeniedError, AuthenticationError
from faf.util.jwt import AccessTokenPayload, JWTError

BEARER_PREFIX = "Bearer "


def authenticate(
    request: Request,
    jwt_service: JWTService,
    scope: OAuthScope | None = None,
    any_role: tuple[Role, ...] = (),
) -> AccessTokenPayload:
    """Verify the caller's bearer token against a route policy.

    Args:
        request: Incoming request carrying the Authorization header
        jwt_service: Access token service
        scope: Scope the token must grant, if any
        any_role: The token must hold at least one of these roles, if given

    Returns:
        Verified token payload

    Raises:
        AuthenticationError: If the token is missing or invalid
        AccessDeniedError: If the scope or roles do not match
    """
    authorization = request.headers.get("Authorization", "")
    if not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Not authenticated")

    try:
        payload = jwt_service.verify_token(authorization[len(BEARER_PREFIX) :])
    except JWTError as e:
        raise AuthenticationError(str(e))

    if scope is not None and not jwt_service.has_scope(payload, scope):
        raise AccessDeniedError(f"Missing scope: {scope.value}")

    if any_role and not jwt_service.has_any_role(payload, any_role):
        raise AccessDeniedError("Insufficient role")

    return payload


def require_user_id(payload: AccessTokenPayload) -> str:
    """User id of a token that must have been issued to a user.

    Raises:
        AccessDeniedError: For client credential tokens
    """
    if not payload.user_id:
        raise AccessDeniedError("Token is not bound to a user")
    return payload.user_id


def client_ip(request: Request) -> str | None:
    """Caller address, honoring the first X-Forwarded-For entry of a proxy."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else None
