"""In-memory name history repository for testing."""

from typing import Optional

from faf.domain.model.name_record import NameRecord
from faf.domain.repository.name_record import NameRecordRepository
from faf.domain.value import UserId


class InMemoryNameRecordRepository(NameRecordRepository):
    """In-memory implementation of NameRecordRepository for testing."""

    def __init__(self) -> None:
        self._records: list[NameRecord] = []

    async def save(self, record: NameRecord) -> NameRecord:
        self._records.append(record)
        return record

    async def find_latest_by_name(self, name: str) -> Optional[NameRecord]:
        matching = [r for r in self._records if r.name == name]
        return max(matching, key=lambda r: r.change_time, default=None)

    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[NameRecord]:
        matching = [r for r in self._records if r.user_id == user_id]
        return max(matching, key=lambda r: r.change_time, default=None)
