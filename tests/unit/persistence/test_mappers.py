"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from faf.domain.model import Ladder1v1Rating
from faf.domain.value import UserId
from faf.persistence.mappers import (
    rating_to_dict,
    row_to_ladder1v1_rating,
    row_to_name_record,
    row_to_user,
    user_to_dict,
)


class TestUserMapper:
    def test_row_with_string_ids(self):
        """asyncpg may hand back UUIDs as strings; both are accepted."""
        user_id = uuid4()
        now = datetime.now(timezone.utc)

        user = row_to_user(
            {
                "id": str(user_id),
                "login": "Player1",
                "email": "p1@example.com",
                "password": "0" * 64,
                "steam_id": None,
                "recent_ip_address": "127.0.0.1",
                "created_at": now,
                "updated_at": now,
            }
        )

        assert user.id == UserId(user_id)
        assert user.recent_ip_address == "127.0.0.1"
        assert user_to_dict(user)["login"] == "Player1"


class TestNameRecordMapper:
    def test_row(self):
        record_id, user_id = uuid4(), uuid4()
        changed = datetime(2025, 3, 1, tzinfo=timezone.utc)

        record = row_to_name_record(
            {"id": record_id, "user_id": user_id, "name": "Old", "change_time": changed}
        )

        assert record.user_id == UserId(user_id)
        assert record.change_time == changed


class TestRatingMapper:
    def test_rating_keyed_on_user_id(self):
        user_id = UserId(uuid4())
        rating = Ladder1v1Rating(user_id=user_id, mean=1500, deviation=500)

        row = rating_to_dict(rating)

        assert row["id"] == user_id
        assert row_to_ladder1v1_rating(row) == rating
