"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from faf.domain.model import GlobalRating, Ladder1v1Rating, NameRecord, User
from faf.domain.model.rating import Rating
from faf.domain.value import NameRecordId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        login=row["login"],
        email=row["email"],
        password=row["password"],
        steam_id=row.get("steam_id"),
        recent_ip_address=row.get("recent_ip_address"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_name_record(row: Dict[str, Any]) -> NameRecord:
    """Convert database row to NameRecord domain model."""
    return NameRecord(
        id=NameRecordId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        name=row["name"],
        change_time=row["change_time"],
    )


def name_record_to_dict(record: NameRecord) -> Dict[str, Any]:
    """Convert NameRecord domain model to database dict."""
    return record.model_dump()


def row_to_global_rating(row: Dict[str, Any]) -> GlobalRating:
    """Convert database row to GlobalRating domain model."""
    return GlobalRating(
        user_id=UserId(_uuid(row["id"])),
        mean=row["mean"],
        deviation=row["deviation"],
        num_games=row["num_games"],
    )


def row_to_ladder1v1_rating(row: Dict[str, Any]) -> Ladder1v1Rating:
    """Convert database row to Ladder1v1Rating domain model."""
    return Ladder1v1Rating(
        user_id=UserId(_uuid(row["id"])),
        mean=row["mean"],
        deviation=row["deviation"],
        num_games=row["num_games"],
    )


def rating_to_dict(rating: Rating) -> Dict[str, Any]:
    """Convert a rating to database dict. Rating tables key on the user id."""
    return {
        "id": rating.user_id,
        "mean": rating.mean,
        "deviation": rating.deviation,
        "num_games": rating.num_games,
    }
