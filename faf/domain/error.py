"""Domain layer errors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DomainError(Exception):
    """Base domain error."""

    pass


class ErrorCode(Enum):
    """User-facing error codes.

    Each member carries a numeric code, a short title and a detail template
    that is filled with the error arguments.
    """

    ALREADY_REGISTERED = (
        100,
        "Registration failed",
        "Cannot register because you are already registered.",
    )
    USERNAME_TAKEN = (
        101,
        "Username taken",
        "The username '{0}' is already in use.",
    )
    USERNAME_INVALID = (
        102,
        "Invalid username",
        "The username '{0}' is invalid. It must start with a letter and "
        "contain 3-16 letters, digits, '_' or '-'.",
    )
    USERNAME_RESERVED = (
        103,
        "Username reserved",
        "The username '{0}' is reserved by its previous owner for {1} months.",
    )
    USERNAME_CHANGE_TOO_EARLY = (
        104,
        "Username change not allowed",
        "Only one name change is allowed per time period. "
        "Please try again in {0} days.",
    )
    EMAIL_INVALID = (
        105,
        "Invalid email address",
        "The email address '{0}' is invalid.",
    )
    EMAIL_REGISTERED = (
        106,
        "Email address already registered",
        "The email address '{0}' is already in use by another account.",
    )
    PASSWORD_CHANGE_FAILED_WRONG_PASSWORD = (
        107,
        "Password change failed",
        "Your current password did not match.",
    )
    EMAIL_CHANGE_FAILED_WRONG_PASSWORD = (
        108,
        "Email change failed",
        "Your current password did not match.",
    )
    UNKNOWN_IDENTIFIER = (
        109,
        "Unknown identifier",
        "No account was found for '{0}'.",
    )
    TOKEN_INVALID = (
        110,
        "Invalid token",
        "The token is invalid or has expired.",
    )
    STEAM_ID_UNCHANGEABLE = (
        111,
        "Steam account already linked",
        "Your account is already linked to a Steam account, "
        "which cannot be changed.",
    )
    STEAM_LINK_NO_FA_GAME = (
        112,
        "Forged Alliance not owned",
        "The linked Steam account does not own Supreme Commander: Forged Alliance.",
    )
    STEAM_ID_ALREADY_LINKED = (
        113,
        "Steam account already linked",
        "This Steam account is already linked to the FAF account '{0}'.",
    )

    def __init__(self, code: int, title: str, detail: str) -> None:
        self.code = code
        self.title = title
        self.detail = detail


@dataclass(frozen=True)
class Error:
    """A single error occurrence with the arguments for its detail message."""

    code: ErrorCode
    args: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def detail(self) -> str:
        return self.code.detail.format(*self.args)

    def to_dict(self) -> dict[str, Any]:
        """JSON:API style error object."""
        return {
            "code": str(self.code.code),
            "title": self.code.title,
            "detail": self.detail,
            "meta": {"args": [str(arg) for arg in self.args]},
        }


class ApiError(DomainError):
    """Business rule violation reported back to the caller.

    Carries one or more errors; the request is rejected and never retried.
    """

    def __init__(self, *errors: Error) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(error.detail for error in self.errors))

    @classmethod
    def of(cls, code: ErrorCode, *args: Any) -> "ApiError":
        """Build an error with a single code."""
        return cls(Error(code, args))

    def has_code(self, code: ErrorCode) -> bool:
        return any(error.code is code for error in self.errors)

