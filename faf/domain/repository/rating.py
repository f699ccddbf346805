"""Rating repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from faf.domain.model.rating import GlobalRating, Ladder1v1Rating
from faf.domain.value import UserId


class GlobalRatingRepository(ABC):
    """Repository for global ratings."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[GlobalRating]:
        pass

    @abstractmethod
    async def save(self, rating: GlobalRating) -> GlobalRating:
        pass


class Ladder1v1RatingRepository(ABC):
    """Repository for ladder 1v1 ratings."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Ladder1v1Rating]:
        pass

    @abstractmethod
    async def save(self, rating: Ladder1v1Rating) -> Ladder1v1Rating:
        pass
