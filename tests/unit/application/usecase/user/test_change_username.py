"""Unit tests for the change username use cases."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from faf.application.usecase.user import (
    ChangeUsernameUseCase,
    ForceChangeUsernameUseCase,
)
from faf.application.usecase.user.change_username import ChangeUsernameRequest
from faf.domain.error import ApiError, ErrorCode
from faf.domain.model import NameRecord, User
from faf.domain.repository import NameRecordRepository, UserRepository
from faf.domain.value import NameRecordId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestChangeUsernameUseCases:
    """Tests for ChangeUsernameUseCase and ForceChangeUsernameUseCase."""

    async def _create_recently_renamed_user(
        self, user_repo: UserRepository, name_record_repo: NameRecordRepository
    ) -> User:
        user = await user_repo.save(
            User(
                id=UserId(uuid4()),
                login="Current",
                email="p1@example.com",
                password="0" * 64,
            )
        )
        await name_record_repo.save(
            NameRecord(
                id=NameRecordId(uuid4()),
                user_id=user.id,
                name="Previous",
                change_time=datetime.now(timezone.utc),
            )
        )
        return user

    @pytest.mark.asyncio
    async def test_own_change_respects_cooldown(self, unit_env):
        """Should reject a second rename right after the first."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        name_record_repo = await unit_env.get(NameRecordRepository)
        use_case = await unit_env.get(ChangeUsernameUseCase)
        user = await self._create_recently_renamed_user(user_repo, name_record_repo)

        # Act & Assert
        with pytest.raises(ApiError) as exc_info:
            await use_case.execute(
                ChangeUsernameRequest(user_id=str(user.id), new_username="NewName")
            )

        assert exc_info.value.has_code(ErrorCode.USERNAME_CHANGE_TOO_EARLY)

    @pytest.mark.asyncio
    async def test_forced_change_skips_cooldown(self, unit_env):
        """Should rename on a moderator's behalf despite the cooldown."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        name_record_repo = await unit_env.get(NameRecordRepository)
        use_case = await unit_env.get(ForceChangeUsernameUseCase)
        user = await self._create_recently_renamed_user(user_repo, name_record_repo)

        # Act
        response = await use_case.execute(
            ChangeUsernameRequest(
                user_id=str(user.id), new_username="NewName", ip_address="10.0.0.1"
            )
        )

        # Assert
        assert response.login == "NewName"
        assert response.user_id == str(user.id)

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """Should reject a rename for an account that does not exist."""
        use_case = await unit_env.get(ForceChangeUsernameUseCase)

        with pytest.raises(ApiError) as exc_info:
            await use_case.execute(
                ChangeUsernameRequest(user_id=str(uuid4()), new_username="NewName")
            )

        assert exc_info.value.has_code(ErrorCode.TOKEN_INVALID)
