"""In-memory repository implementations for testing."""

from .anope_user import InMemoryAnopeUserRepository
from .name_record import InMemoryNameRecordRepository
from .rating import InMemoryGlobalRatingRepository, InMemoryLadder1v1RatingRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnopeUserRepository",
    "InMemoryGlobalRatingRepository",
    "InMemoryLadder1v1RatingRepository",
    "InMemoryNameRecordRepository",
    "InMemoryUserRepository",
]
