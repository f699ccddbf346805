"""Password reset use cases."""

from pydantic import BaseModel

from faf.domain.service import UserService


class RequestPasswordResetRequest(BaseModel):
    """Request password reset request."""

    identifier: str  # Login or email


class RequestPasswordResetUseCase:
    """Use case for mailing a password reset link."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: RequestPasswordResetRequest) -> None:
        """Execute password reset request.

        Raises:
            ApiError: UNKNOWN_IDENTIFIER
        """
        await self.user_service.request_password_reset(request.identifier)


class PerformPasswordResetRequest(BaseModel):
    """Perform password reset request."""

    token: str  # Password reset token from the mail
    new_password: str


class PerformPasswordResetUseCase:
    """Use case for setting a new password from a reset link."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: PerformPasswordResetRequest) -> None:
        """Execute password reset.

        Raises:
            ApiError: TOKEN_INVALID
        """
        await self.user_service.perform_password_reset(
            request.token, request.new_password
        )
