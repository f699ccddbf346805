"""Repository interfaces for FAF accounts.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from faf.domain.repository.anope_user import AnopeUserRepository
from faf.domain.repository.name_record import NameRecordRepository
from faf.domain.repository.rating import (
    GlobalRatingRepository,
    Ladder1v1RatingRepository,
)
from faf.domain.repository.user import UserRepository

__all__ = [
    "AnopeUserRepository",
    "GlobalRatingRepository",
    "Ladder1v1RatingRepository",
    "NameRecordRepository",
    "UserRepository",
]
