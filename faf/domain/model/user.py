"""User aggregate root.

A user is created when a registration is activated and is never
hard-deleted. Login, email and Steam id are unique across users.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from faf.domain.model.common import DomainModel
from faf.domain.value import UserId


class User(DomainModel):
    """User account."""

    id: UserId
    login: str
    email: str
    password: str  # Password hash, never the plain password
    steam_id: Optional[str] = None  # Immutable once linked
    recent_ip_address: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_steam_link(self) -> bool:
        return bool(self.steam_id)
