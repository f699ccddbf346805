"""PostgreSQL implementations of the rating repositories."""

from typing import Optional

from sqlalchemy import Table, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from faf.domain.model import GlobalRating, Ladder1v1Rating
from faf.domain.repository import GlobalRatingRepository, Ladder1v1RatingRepository
from faf.domain.value import UserId
from faf.persistence.mappers import (
    rating_to_dict,
    row_to_global_rating,
    row_to_ladder1v1_rating,
)
from faf.persistence.tables import global_rating_table, ladder1v1_rating_table


async def _upsert(session: AsyncSession, table: Table, values: dict) -> None:
    stmt = insert(table).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.id],
        set_={
            "mean": stmt.excluded.mean,
            "deviation": stmt.excluded.deviation,
            "num_games": stmt.excluded.num_games,
        },
    )
    await session.execute(stmt)
    await session.flush()


class PostgresGlobalRatingRepository(GlobalRatingRepository):
    """PostgreSQL implementation of GlobalRatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[GlobalRating]:
        stmt = select(global_rating_table).where(global_rating_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_global_rating(dict(row)) if row else None

    async def save(self, rating: GlobalRating) -> GlobalRating:
        await _upsert(self.session, global_rating_table, rating_to_dict(rating))
        return rating


class PostgresLadder1v1RatingRepository(Ladder1v1RatingRepository):
    """PostgreSQL implementation of Ladder1v1RatingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[Ladder1v1Rating]:
        stmt = select(ladder1v1_rating_table).where(
            ladder1v1_rating_table.c.id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_ladder1v1_rating(dict(row)) if row else None

    async def save(self, rating: Ladder1v1Rating) -> Ladder1v1Rating:
        await _upsert(self.session, ladder1v1_rating_table, rating_to_dict(rating))
        return rating
