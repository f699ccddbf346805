"""Anope credential store interface."""

from abc import ABC, abstractmethod


class AnopeUserRepository(ABC):
    """Password mirror for the IRC services (Anope).

    Anope authenticates chat users against its own table and only
    understands MD5 hex digests.
    """

    @abstractmethod
    async def update_password(self, login: str, password_md5: str) -> None:
        """Store the password digest for a nick.

        Args:
            login: The user's login, used as nick core display name
            password_md5: MD5 hex digest of the plain password
        """
        pass
