"""Integration tests for the account repositories.

These tests exercise the repository contract through the container, the
way the domain services use it.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from faf.domain.model import GlobalRating, NameRecord, User
from faf.domain.repository import (
    GlobalRatingRepository,
    NameRecordRepository,
    UserRepository,
)
from faf.domain.value import NameRecordId, UserId
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


def make_user(**fields) -> User:
    return User(
        id=UserId(uuid4()),
        login=fields.get("login", "Player1"),
        email=fields.get("email", "p1@example.com"),
        password="0" * 64,
        steam_id=fields.get("steam_id"),
    )


class TestUserRepositoryIntegration:
    """Integration tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_save_then_find_by_each_key(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = make_user(steam_id="76561198000000001")

        # Act
        await user_repo.save(user)

        # Assert
        assert (await user_repo.find_by_id(user.id)).login == "Player1"
        assert (await user_repo.find_by_login("Player1")).id == user.id
        assert (await user_repo.find_by_email("p1@example.com")).id == user.id
        assert (await user_repo.find_by_steam_id("76561198000000001")).id == user.id
        assert await user_repo.exists_by_login("Player1")
        assert await user_repo.exists_by_email("p1@example.com")

    @pytest.mark.asyncio
    async def test_missing_user(self, integration_env):
        user_repo = await integration_env.get(UserRepository)

        assert await user_repo.find_by_id(UserId(uuid4())) is None
        assert await user_repo.find_by_login("Nobody") is None
        assert not await user_repo.exists_by_email("nobody@example.com")

    @pytest.mark.asyncio
    async def test_save_updates_existing_user(self, integration_env):
        """Saving a user with a known id replaces the stored account."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act
        await user_repo.save(user.model_copy(update={"login": "Renamed"}))

        # Assert
        assert await user_repo.find_by_login("Player1") is None
        assert (await user_repo.find_by_id(user.id)).login == "Renamed"


class TestNameRecordRepositoryIntegration:
    """Integration tests for NameRecordRepository."""

    @pytest.mark.asyncio
    async def test_latest_record_wins(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        name_record_repo = await integration_env.get(NameRecordRepository)
        first = await user_repo.save(make_user())
        second = await user_repo.save(make_user(login="Other", email="o@example.com"))
        now = datetime.now(timezone.utc)

        for user, age in ((first, 300), (second, 10)):
            await name_record_repo.save(
                NameRecord(
                    id=NameRecordId(uuid4()),
                    user_id=user.id,
                    name="Shared",
                    change_time=now - timedelta(days=age),
                )
            )

        # Act
        latest = await name_record_repo.find_latest_by_name("Shared")

        # Assert
        assert latest.user_id == second.id
        assert (await name_record_repo.find_latest_by_user_id(first.id)).name == "Shared"
        assert await name_record_repo.find_latest_by_name("Unused") is None


class TestRatingRepositoryIntegration:
    """Integration tests for the rating repositories."""

    @pytest.mark.asyncio
    async def test_save_overwrites_rating(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        rating_repo = await integration_env.get(GlobalRatingRepository)
        user = await user_repo.save(make_user())

        # Act
        await rating_repo.save(GlobalRating(user_id=user.id, mean=1500, deviation=500))
        await rating_repo.save(
            GlobalRating(user_id=user.id, mean=1600, deviation=400, num_games=3)
        )

        # Assert
        rating = await rating_repo.find_by_user_id(user.id)
        assert rating.mean == 1600
        assert rating.num_games == 3
