"""Activate user use case."""

from datetime import datetime

from pydantic import BaseModel

from faf.domain.service import UserService


class ActivateRequest(BaseModel):
    """Activate request."""

    token: str  # Registration token from the activation mail
    password: str
    ip_address: str | None = None


class ActivateResponse(BaseModel):
    """Activate response."""

    user_id: str
    login: str
    email: str
    created_at: datetime


class ActivateUseCase:
    """Use case for turning a registration token into an account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize activate use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ActivateRequest) -> ActivateResponse:
        """Execute activation flow.

        Steps:
        1. Resolve the registration token
        2. Create the user with initial ratings
        3. Return the new account

        Raises:
            ApiError: TOKEN_INVALID or USERNAME_TAKEN
        """
        user = await self.user_service.activate(
            request.token, request.password, request.ip_address
        )
        return ActivateResponse(
            user_id=str(user.id),
            login=user.login,
            email=user.email,
            created_at=user.created_at,
        )
