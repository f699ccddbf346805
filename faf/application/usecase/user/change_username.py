"""Change username use cases."""

from pydantic import BaseModel

from faf.domain.service import UserService


class ChangeUsernameRequest(BaseModel):
    """Change username request."""

    user_id: str  # Caller, or the target account when forced
    new_username: str
    ip_address: str | None = None


class ChangeUsernameResponse(BaseModel):
    """Change username response."""

    user_id: str
    login: str


class ChangeUsernameUseCase:
    """Use case for a user renaming their own account.

    Subject to the change cooldown and username reservations.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize change username use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ChangeUsernameRequest) -> ChangeUsernameResponse:
        """Execute change username flow.

        Raises:
            ApiError: USERNAME_INVALID, USERNAME_TAKEN,
                USERNAME_CHANGE_TOO_EARLY or USERNAME_RESERVED
        """
        user = await self.user_service.get_user(request.user_id)
        updated = await self.user_service.change_login(
            request.new_username, user, request.ip_address
        )
        return ChangeUsernameResponse(user_id=str(updated.id), login=updated.login)


class ForceChangeUsernameUseCase:
    """Use case for a moderator renaming another account.

    Cooldown and reservations do not apply, the name must still be valid
    and free.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangeUsernameRequest) -> ChangeUsernameResponse:
        user = await self.user_service.get_user(request.user_id)
        updated = await self.user_service.change_login_forced(
            request.new_username, user, request.ip_address
        )
        return ChangeUsernameResponse(user_id=str(updated.id), login=updated.login)
