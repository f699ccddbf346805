"""Register user use case."""

from pydantic import BaseModel

from faf.domain.service import UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str


class RegisterUseCase:
    """Use case for requesting a new account.

    The account only exists once the activation link mailed to the user is
    redeemed.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> None:
        """Execute registration flow.

        Raises:
            ApiError: If username or email are rejected
        """
        await self.user_service.register(request.username, request.email)
