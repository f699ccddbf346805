"""Change password use case."""

from pydantic import BaseModel

from faf.domain.service import UserService


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From authenticated user
    current_password: str
    new_password: str


class ChangePasswordUseCase:
    """Use case for changing the caller's password."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Execute change password flow.

        Raises:
            ApiError: PASSWORD_CHANGE_FAILED_WRONG_PASSWORD
        """
        user = await self.user_service.get_user(request.user_id)
        await self.user_service.change_password(
            request.current_password, request.new_password, user
        )
