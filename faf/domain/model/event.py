"""Domain events."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from faf.domain.model.common import DomainModel
from faf.domain.value import UserId


class UserUpdatedEvent(DomainModel):
    """Published whenever a user is created or one of its identifying
    attributes (login, email, recent address) changes."""

    user_id: UserId
    login: str
    email: str
    ip_address: Optional[str] = None
    occurred_at: datetime = Field(default_factory=datetime.now)
