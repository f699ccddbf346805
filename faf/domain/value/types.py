"""Domain value types for FAF accounts."""

from enum import Enum


class TokenType(str, Enum):
    """Kind discriminator of a signed claim token.

    A token issued for one purpose is never accepted for another.
    """

    REGISTRATION = "REGISTRATION"
    PASSWORD_RESET = "PASSWORD_RESET"
    LINK_TO_STEAM = "LINK_TO_STEAM"


class Role(str, Enum):
    """Roles granted to the bearer of an access token."""

    USER = "ROLE_USER"
    MODERATOR = "ROLE_MODERATOR"
    ADMINISTRATOR = "ROLE_ADMINISTRATOR"


class OAuthScope(str, Enum):
    """OAuth scopes relevant to account management."""

    CREATE_USER = "create_user"
    WRITE_ACCOUNT_DATA = "write_account_data"
