"""PostgreSQL repository implementations."""

from faf.persistence.repository.anope_user import PostgresAnopeUserRepository
from faf.persistence.repository.name_record import PostgresNameRecordRepository
from faf.persistence.repository.rating import (
    PostgresGlobalRatingRepository,
    PostgresLadder1v1RatingRepository,
)
from faf.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresNameRecordRepository",
    "PostgresGlobalRatingRepository",
    "PostgresLadder1v1RatingRepository",
    "PostgresAnopeUserRepository",
]
