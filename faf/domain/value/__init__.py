"""Domain value objects for FAF accounts."""

from faf.domain.value.identifiers import NameRecordId, UserId
from faf.domain.value.types import OAuthScope, Role, TokenType

__all__ = [
    # Identifiers
    "UserId",
    "NameRecordId",
    # Types
    "OAuthScope",
    "Role",
    "TokenType",
]
