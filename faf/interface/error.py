"""Interface layer errors and their HTTP rendering."""

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse

from faf.adapter.error import AdapterError
from faf.domain.error import ApiError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Missing, malformed or expired access token."""

    pass


class AccessDeniedError(InterfaceError):
    """Caller lacks a required role or scope."""

    pass


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render business rule violations as 422 with all collected errors."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": [error.to_dict() for error in exc.errors]},
    )


async def adapter_error_handler(request: Request, exc: AdapterError) -> JSONResponse:
    """Render failures of Steam or the mail server as 502."""
    logfire.error(
        "Upstream service failed",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Upstream service unavailable"},
    )


async def authentication_error_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def access_denied_handler(request: Request, exc: AccessDeniedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc)},
    )
