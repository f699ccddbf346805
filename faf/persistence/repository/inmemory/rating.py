"""In-memory rating repositories for testing."""

from typing import Optional

from faf.domain.model.rating import GlobalRating, Ladder1v1Rating
from faf.domain.repository.rating import (
    GlobalRatingRepository,
    Ladder1v1RatingRepository,
)
from faf.domain.value import UserId


class InMemoryGlobalRatingRepository(GlobalRatingRepository):
    """In-memory implementation of GlobalRatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[UserId, GlobalRating] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[GlobalRating]:
        return self._ratings.get(user_id)

    async def save(self, rating: GlobalRating) -> GlobalRating:
        self._ratings[rating.user_id] = rating
        return rating


class InMemoryLadder1v1RatingRepository(Ladder1v1RatingRepository):
    """In-memory implementation of Ladder1v1RatingRepository for testing."""

    def __init__(self) -> None:
        self._ratings: dict[UserId, Ladder1v1Rating] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[Ladder1v1Rating]:
        return self._ratings.get(user_id)

    async def save(self, rating: Ladder1v1Rating) -> Ladder1v1Rating:
        self._ratings[rating.user_id] = rating
        return rating
