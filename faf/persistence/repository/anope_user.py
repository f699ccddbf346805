"""PostgreSQL implementation of the Anope credential store."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from faf.domain.repository import AnopeUserRepository
from faf.persistence.tables import anope_nick_core_table


class PostgresAnopeUserRepository(AnopeUserRepository):
    """Writes password digests to Anope's nick core table.

    Nick cores are created by Anope when a user first connects to chat, so
    only existing rows are updated.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def update_password(self, login: str, password_md5: str) -> None:
        stmt = (
            anope_nick_core_table.update()
            .where(anope_nick_core_table.c.display == login)
            .values({"pass": f"md5:{password_md5}"})
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            logfire.debug("No anope nick core for login", login=login)
        await self.session.flush()
