"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from faf.config import Settings
from faf.domain.repository import (
    AnopeUserRepository,
    GlobalRatingRepository,
    Ladder1v1RatingRepository,
    NameRecordRepository,
    UserRepository,
)
from faf.domain.service import EventBus, EventPublisher
from faf.persistence.database import create_engine, create_session_factory
from faf.persistence.repository import (
    PostgresAnopeUserRepository,
    PostgresGlobalRatingRepository,
    PostgresLadder1v1RatingRepository,
    PostgresNameRecordRepository,
    PostgresUserRepository,
)
from faf.util.di.base import ProviderBase
from faf.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence shared with the lobby server and website."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide the engine for the account database, traced by Logfire."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_event_publisher(self, event_bus: EventBus) -> EventPublisher:
        """Provide the request's user change publisher.

        Flushed or discarded together with the request's session.
        """
        return EventPublisher(event_bus=event_bus)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        event_publisher: EventPublisher,
    ) -> AsyncIterator[AsyncSession]:
        """One session and transaction per request.

        Committed when the request scope closes cleanly, rolled back when it
        closes with an exception. User change events queued by the request
        are dispatched after the commit and dropped on rollback.
        """
        async with session_factory() as session:
            # dishka sends the exception the scope closed with, if any
            exception = yield session
            if exception is not None:
                logfire.warn("Session rollback", error=str(exception))
                await session.rollback()
                event_publisher.discard()
                return

            try:
                await session.commit()
            except Exception as e:
                logfire.warn("Session commit failed", error=str(e))
                event_publisher.discard()
                raise
            logfire.debug("Session committed")
        await event_publisher.flush()

    # Repositories share the request's session and so its transaction
    user_repository = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    name_record_repository = provide(
        PostgresNameRecordRepository, provides=NameRecordRepository, scope=Scope.REQUEST
    )
    global_rating_repository = provide(
        PostgresGlobalRatingRepository,
        provides=GlobalRatingRepository,
        scope=Scope.REQUEST,
    )
    ladder1v1_rating_repository = provide(
        PostgresLadder1v1RatingRepository,
        provides=Ladder1v1RatingRepository,
        scope=Scope.REQUEST,
    )
    anope_user_repository = provide(
        PostgresAnopeUserRepository, provides=AnopeUserRepository, scope=Scope.REQUEST
    )
