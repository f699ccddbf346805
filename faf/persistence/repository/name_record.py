"""PostgreSQL implementation of the name history repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from faf.domain.model import NameRecord
from faf.domain.repository import NameRecordRepository
from faf.domain.value import UserId
from faf.persistence.mappers import name_record_to_dict, row_to_name_record
from faf.persistence.tables import name_history_table


class PostgresNameRecordRepository(NameRecordRepository):
    """PostgreSQL implementation of NameRecordRepository.

    Records are only ever inserted.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, record: NameRecord) -> NameRecord:
        stmt = name_history_table.insert().values(**name_record_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def _find_latest(self, *criteria) -> Optional[NameRecord]:
        stmt = (
            select(name_history_table)
            .where(*criteria)
            .order_by(name_history_table.c.change_time.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_name_record(dict(row)) if row else None

    async def find_latest_by_name(self, name: str) -> Optional[NameRecord]:
        """Find the most recent record of a name being given up."""
        return await self._find_latest(name_history_table.c.name == name)

    async def find_latest_by_user_id(self, user_id: UserId) -> Optional[NameRecord]:
        """Find the most recent name change of a user."""
        return await self._find_latest(name_history_table.c.user_id == user_id)
