"""Name history repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from faf.domain.model.name_record import NameRecord
from faf.domain.value import UserId


class NameRecordRepository(ABC):
    """Repository for the append-only name history."""

    @abstractmethod
    async def save(self, record: NameRecord) -> NameRecord:
        """Append a name record.

        Args:
            record: The record to store

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def find_latest_by_name(self, name: str) -> Optional[NameRecord]:
        """Find the most recent record of a name being given up.

        Args:
            name: The former login

        Returns:
            The newest record for that name, None if the name was never
            given up
        """
        pass

    @abstractmethod
    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[NameRecord]:
        """Find the most recent name change of a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            The newest record of that user, None if they never changed name
        """
        pass
