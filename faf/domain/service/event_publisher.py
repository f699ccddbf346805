"""Account change notification."""

from collections.abc import Awaitable, Callable

import logfire

from faf.domain.model.event import UserUpdatedEvent

Subscriber = Callable[[UserUpdatedEvent], Awaitable[None]]


class EventBus:
    """Application wide list of subscribers to user changes."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    async def dispatch(self, event: UserUpdatedEvent) -> None:
        for subscriber in self._subscribers:
            await subscriber(event)


class EventPublisher:
    """Collects the events of one request.

    Events are only dispatched once the request's transaction committed,
    subscribers never see changes that were rolled back.
    """

    def __init__(self, event_bus: EventBus) -> None:
        self.event_bus = event_bus
        self._pending: list[UserUpdatedEvent] = []

    @property
    def pending(self) -> list[UserUpdatedEvent]:
        return list(self._pending)

    def publish(self, event: UserUpdatedEvent) -> None:
        self._pending.append(event)

    async def flush(self) -> None:
        """Dispatch queued events after a successful commit."""
        events, self._pending = self._pending, []
        for event in events:
            await self.event_bus.dispatch(event)
            logfire.info(
                "User change published", user_id=str(event.user_id), login=event.login
            )

    def discard(self) -> None:
        """Drop queued events after a rollback."""
        if self._pending:
            logfire.info("User changes discarded", count=len(self._pending))
        self._pending = []
