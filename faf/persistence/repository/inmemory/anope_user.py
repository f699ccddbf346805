"""In-memory Anope credential store for testing."""

from faf.domain.repository.anope_user import AnopeUserRepository


class InMemoryAnopeUserRepository(AnopeUserRepository):
    """Keeps the latest password digest per login."""

    def __init__(self) -> None:
        self.passwords: dict[str, str] = {}

    async def update_password(self, login: str, password_md5: str) -> None:
        self.passwords[login] = password_md5
