"""In-memory user repository for testing."""

from typing import Optional

from faf.domain.model.user import User
from faf.domain.repository.user import UserRepository
from faf.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """Accounts kept in a dict by id; every other lookup is a scan."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _find_by(self, field: str, value: str) -> Optional[User]:
        return next(
            (user for user in self._users.values() if getattr(user, field) == value),
            None,
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_login(self, login: str) -> Optional[User]:
        return self._find_by("login", login)

    async def find_by_email(self, email: str) -> Optional[User]:
        return self._find_by("email", email)

    async def find_by_steam_id(self, steam_id: str) -> Optional[User]:
        return self._find_by("steam_id", steam_id)

    async def exists_by_login(self, login: str) -> bool:
        return self._find_by("login", login) is not None

    async def exists_by_email(self, email: str) -> bool:
        return self._find_by("email", email) is not None

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
