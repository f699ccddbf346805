"""Change email use case."""

from pydantic import BaseModel

from faf.domain.service import UserService


class ChangeEmailRequest(BaseModel):
    """Change email request."""

    user_id: str  # From authenticated user
    current_password: str
    new_email: str
    ip_address: str | None = None


class ChangeEmailUseCase:
    """Use case for changing the caller's email address."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangeEmailRequest) -> None:
        """Execute change email flow.

        Raises:
            ApiError: EMAIL_CHANGE_FAILED_WRONG_PASSWORD or EMAIL_INVALID
        """
        user = await self.user_service.get_user(request.user_id)
        await self.user_service.change_email(
            request.current_password, request.new_email, user, request.ip_address
        )
