"""PostgreSQL engine and sessions for the account tables.

The account tables are shared with the lobby server and the website, so
this service keeps its pool small and never holds transactions open past
a single request.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from faf.config import DatabaseSettings, Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database.

    SQL statements are echoed when running with debug enabled.
    """
    database: DatabaseSettings = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped sessions.

    Repositories flush explicitly; the request's session is committed once
    by the persistence provider.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
