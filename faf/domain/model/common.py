"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes are expressed with ``model_copy(update=...)``
    and handed back to the owning repository.
    """

    model_config = ConfigDict(frozen=True)
