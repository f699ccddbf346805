"""Name history entity."""

from datetime import datetime

from pydantic import Field

from faf.domain.model.common import DomainModel
from faf.domain.value import NameRecordId, UserId


class NameRecord(DomainModel):
    """A login previously held by a user.

    Written every time a user changes their login and never modified
    afterwards. Drives username reservation and the change cooldown.
    """

    id: NameRecordId
    user_id: UserId
    name: str
    change_time: datetime = Field(default_factory=datetime.now)
