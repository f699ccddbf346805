"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from faf.domain.model import User
from faf.domain.repository import UserRepository
from faf.domain.value import UserId
from faf.persistence.mappers import row_to_user, user_to_dict
from faf.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_login(self, login: str) -> Optional[User]:
        """Find a user by their current login."""
        return await self._find_one(users_table.c.login == login)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        return await self._find_one(users_table.c.email == email)

    async def find_by_steam_id(self, steam_id: str) -> Optional[User]:
        """Find the user a Steam account is linked to."""
        return await self._find_one(users_table.c.steam_id == steam_id)

    async def exists_by_login(self, login: str) -> bool:
        stmt = select(exists().where(users_table.c.login == login))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(users_table.c.email == email))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """Insert a new account or overwrite the stored one with the same id.

        A login, email or Steam id held by another account violates the
        table's unique constraints and fails the request.
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={key: value for key, value in values.items() if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
