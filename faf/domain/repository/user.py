"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from faf.domain.model.user import User
from faf.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login(self, login: str) -> Optional[User]:
        """Find a user by their current login.

        Args:
            login: The login to search for

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_steam_id(self, steam_id: str) -> Optional[User]:
        """Find the user a Steam account is linked to.

        Args:
            steam_id: 64-bit Steam id

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_login(self, login: str) -> bool:
        """Check whether a login is currently in use."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email is registered."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
