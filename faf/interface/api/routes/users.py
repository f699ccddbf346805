"""User account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from faf.application.usecase.user import (
    ActivateUseCase,
    BuildSteamLinkUrlUseCase,
    ChangeEmailUseCase,
    ChangePasswordUseCase,
    ChangeUsernameUseCase,
    ForceChangeUsernameUseCase,
    LinkToSteamUseCase,
    PerformPasswordResetUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
)
from faf.application.usecase.user.activate import ActivateRequest, ActivateResponse
from faf.application.usecase.user.change_email import ChangeEmailRequest
from faf.application.usecase.user.change_password import ChangePasswordRequest
from faf.application.usecase.user.change_username import (
    ChangeUsernameRequest,
    ChangeUsernameResponse,
)
from faf.application.usecase.user.link_to_steam import (
    BuildSteamLinkUrlRequest,
    LinkToSteamRequest,
)
from faf.application.usecase.user.password_reset import (
    PerformPasswordResetRequest,
    RequestPasswordResetRequest,
)
from faf.application.usecase.user.register import RegisterRequest
from faf.domain.error import ApiError, ErrorCode
from faf.domain.service import JWTService
from faf.domain.value import OAuthScope, Role
from faf.interface.api.auth import authenticate, client_ip, require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)

MODERATION_ROLES = (Role.MODERATOR, Role.ADMINISTRATOR)


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    username: str
    email: str


class ActivateAPIRequest(BaseModel):
    """API request for activating an account."""

    token: str
    password: str = Field(min_length=1)


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the caller's password."""

    current_password: str
    new_password: str = Field(min_length=1)


class ChangeUsernameAPIRequest(BaseModel):
    """API request for changing a username."""

    new_username: str


class ChangeEmailAPIRequest(BaseModel):
    """API request for changing the caller's email."""

    current_password: str
    new_email: str


class RequestPasswordResetAPIRequest(BaseModel):
    """API request for a password reset mail."""

    identifier: str  # Login or email


class PerformPasswordResetAPIRequest(BaseModel):
    """API request for setting a new password from a reset link."""

    token: str
    new_password: str = Field(min_length=1)


class BuildSteamLinkUrlAPIRequest(BaseModel):
    """API request for starting a Steam link."""

    callback_url: str


class BuildSteamLinkUrlAPIResponse(BaseModel):
    """API response with the Steam login URL."""

    steam_url: str = Field(serialization_alias="steamUrl")


@router.post("/register", status_code=status.HTTP_204_NO_CONTENT)
async def register(
    request: RegisterAPIRequest,
    http_request: Request,
    register_use_case: FromDishka[RegisterUseCase],
    jwt_service: FromDishka[JWTService],
) -> None:
    """Request an account.

    Called by the registration client with a client credentials token.
    Sends an activation mail; the account is created on activation.

    Example:
        POST /users/register
        Authorization: Bearer ...

        Request:
        {
            "username": "Player1",
            "email": "p1@example.com"
        }
    """
    payload = authenticate(http_request, jwt_service, scope=OAuthScope.CREATE_USER)
    if jwt_service.has_any_role(payload, (Role.USER,)):
        raise ApiError.of(ErrorCode.ALREADY_REGISTERED)

    await register_use_case.execute(
        RegisterRequest(username=request.username, email=request.email)
    )


@router.post("/activate", response_model=ActivateResponse)
async def activate(
    request: ActivateAPIRequest,
    http_request: Request,
    activate_use_case: FromDishka[ActivateUseCase],
) -> ActivateResponse:
    """Create the account from an activation link.

    Example:
        POST /users/activate

        Request:
        {
            "token": "eyJ...",
            "password": "secret"
        }

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "login": "Player1",
            "email": "p1@example.com",
            "created_at": "2026-01-15T12:34:56Z"
        }
    """
    return await activate_use_case.execute(
        ActivateRequest(
            token=request.token,
            password=request.password,
            ip_address=client_ip(http_request),
        )
    )


@router.post("/changePassword", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    request: ChangePasswordAPIRequest,
    http_request: Request,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    jwt_service: FromDishka[JWTService],
) -> None:
    """Change the caller's password."""
    payload = authenticate(
        http_request,
        jwt_service,
        scope=OAuthScope.WRITE_ACCOUNT_DATA,
        any_role=(Role.USER,),
    )
    await change_password_use_case.execute(
        ChangePasswordRequest(
            user_id=require_user_id(payload),
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )


@router.post("/changeUsername", response_model=ChangeUsernameResponse)
async def change_username(
    request: ChangeUsernameAPIRequest,
    http_request: Request,
    change_username_use_case: FromDishka[ChangeUsernameUseCase],
    jwt_service: FromDishka[JWTService],
) -> ChangeUsernameResponse:
    """Change the caller's username.

    Limited to one change per cooldown period; names given up by other
    accounts stay reserved for a while.
    """
    payload = authenticate(
        http_request,
        jwt_service,
        scope=OAuthScope.WRITE_ACCOUNT_DATA,
        any_role=(Role.USER,),
    )
    return await change_username_use_case.execute(
        ChangeUsernameRequest(
            user_id=require_user_id(payload),
            new_username=request.new_username,
            ip_address=client_ip(http_request),
        )
    )


@router.post("/{user_id}/forceChangeUsername", response_model=ChangeUsernameResponse)
async def force_change_username(
    user_id: str,
    request: ChangeUsernameAPIRequest,
    http_request: Request,
    force_change_username_use_case: FromDishka[ForceChangeUsernameUseCase],
    jwt_service: FromDishka[JWTService],
) -> ChangeUsernameResponse:
    """Rename another account, bypassing cooldown and reservations."""
    authenticate(
        http_request,
        jwt_service,
        scope=OAuthScope.WRITE_ACCOUNT_DATA,
        any_role=MODERATION_ROLES,
    )
    return await force_change_username_use_case.execute(
        ChangeUsernameRequest(
            user_id=user_id,
            new_username=request.new_username,
            ip_address=client_ip(http_request),
        )
    )


@router.post("/changeEmail", status_code=status.HTTP_204_NO_CONTENT)
async def change_email(
    request: ChangeEmailAPIRequest,
    http_request: Request,
    change_email_use_case: FromDishka[ChangeEmailUseCase],
    jwt_service: FromDishka[JWTService],
) -> None:
    """Change the caller's email address."""
    payload = authenticate(
        http_request,
        jwt_service,
        scope=OAuthScope.WRITE_ACCOUNT_DATA,
        any_role=(Role.USER,),
    )
    await change_email_use_case.execute(
        ChangeEmailRequest(
            user_id=require_user_id(payload),
            current_password=request.current_password,
            new_email=request.new_email,
            ip_address=client_ip(http_request),
        )
    )


@router.post("/requestPasswordReset", status_code=status.HTTP_204_NO_CONTENT)
async def request_password_reset(
    request: RequestPasswordResetAPIRequest,
    request_password_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> None:
    """Mail a password reset link to the account with this login or email."""
    await request_password_reset_use_case.execute(
        RequestPasswordResetRequest(identifier=request.identifier)
    )


@router.post("/performPasswordReset", status_code=status.HTTP_204_NO_CONTENT)
async def perform_password_reset(
    request: PerformPasswordResetAPIRequest,
    perform_password_reset_use_case: FromDishka[PerformPasswordResetUseCase],
) -> None:
    """Set a new password using the token from a reset mail."""
    await perform_password_reset_use_case.execute(
        PerformPasswordResetRequest(
            token=request.token, new_password=request.new_password
        )
    )


@router.post("/buildSteamLinkUrl", response_model=BuildSteamLinkUrlAPIResponse)
async def build_steam_link_url(
    request: BuildSteamLinkUrlAPIRequest,
    http_request: Request,
    build_steam_link_url_use_case: FromDishka[BuildSteamLinkUrlUseCase],
    jwt_service: FromDishka[JWTService],
) -> BuildSteamLinkUrlAPIResponse:
    """Start linking a Steam account.

    Example:
        POST /users/buildSteamLinkUrl

        Request:
        {
            "callback_url": "https://www.faforever.com/account/link"
        }

        Response:
        {
            "steamUrl": "https://steamcommunity.com/openid/login?..."
        }
    """
    payload = authenticate(
        http_request,
        jwt_service,
        scope=OAuthScope.WRITE_ACCOUNT_DATA,
        any_role=(Role.USER,),
    )
    response = await build_steam_link_url_use_case.execute(
        BuildSteamLinkUrlRequest(
            user_id=require_user_id(payload), callback_url=request.callback_url
        )
    )
    return BuildSteamLinkUrlAPIResponse(steam_url=response.steam_url)


@router.get("/linkToSteam")
async def link_to_steam(
    token: str,
    http_request: Request,
    link_to_steam_use_case: FromDishka[LinkToSteamUseCase],
) -> RedirectResponse:
    """Steam sends the user here after login.

    Redirects to the callback URL given when the link was started, with an
    errors query parameter if the account could not be linked.
    """
    response = await link_to_steam_use_case.execute(
        LinkToSteamRequest(
            token=token, redirect_params=dict(http_request.query_params)
        )
    )
    return RedirectResponse(response.redirect_url, status_code=status.HTTP_302_FOUND)
