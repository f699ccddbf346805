"""Domain model entities for FAF accounts."""

from faf.domain.model.event import UserUpdatedEvent
from faf.domain.model.name_record import NameRecord
from faf.domain.model.rating import GlobalRating, Ladder1v1Rating, Rating
from faf.domain.model.user import User

__all__ = [
    "User",
    "NameRecord",
    "Rating",
    "GlobalRating",
    "Ladder1v1Rating",
    "UserUpdatedEvent",
]
