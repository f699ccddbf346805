"""Rating entities.

Ratings are owned by the rating subsystem; this service only creates the
initial rows on activation.
"""

from pydantic import Field

from faf.domain.model.common import DomainModel
from faf.domain.value import UserId


class Rating(DomainModel):
    """TrueSkill rating of a player."""

    user_id: UserId
    mean: float
    deviation: float
    num_games: int = Field(default=0, ge=0)


class GlobalRating(Rating):
    """Rating for custom games."""


class Ladder1v1Rating(Rating):
    """Rating for the 1v1 matchmaker ladder."""
