"""Unit tests for the request lifecycle of user change events."""

from uuid import uuid4

import pytest

from faf.domain.model import UserUpdatedEvent
from faf.domain.service import EventBus, EventPublisher
from faf.domain.value import UserId
from tests.di import build_test_container


def make_event() -> UserUpdatedEvent:
    return UserUpdatedEvent(
        user_id=UserId(uuid4()), login="Player1", email="p1@example.com"
    )


async def recording_bus(container) -> list[UserUpdatedEvent]:
    received: list[UserUpdatedEvent] = []

    async def record(event: UserUpdatedEvent) -> None:
        received.append(event)

    (await container.get(EventBus)).subscribe(record)
    return received


class TestRequestEventPublisher:
    @pytest.mark.asyncio
    async def test_flushed_when_request_completes(self):
        # Arrange
        container = build_test_container()
        received = await recording_bus(container)
        event = make_event()

        # Act
        async with container() as request_container:
            event_publisher = await request_container.get(EventPublisher)
            event_publisher.publish(event)
            assert received == []

        # Assert
        assert received == [event]
        await container.close()

    @pytest.mark.asyncio
    async def test_discarded_when_request_fails(self):
        # Arrange
        container = build_test_container()
        received = await recording_bus(container)

        # Act
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                event_publisher = await request_container.get(EventPublisher)
                event_publisher.publish(make_event())
                raise RuntimeError("request failed")

        # Assert
        assert received == []
        await container.close()

    @pytest.mark.asyncio
    async def test_one_publisher_per_request(self):
        container = build_test_container()

        async with container() as first:
            first_publisher = await first.get(EventPublisher)
            assert await first.get(EventPublisher) is first_publisher
        async with container() as second:
            assert await second.get(EventPublisher) is not first_publisher

        await container.close()
