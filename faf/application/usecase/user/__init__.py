"""User use cases."""

from .activate import ActivateUseCase
from .change_email import ChangeEmailUseCase
from .change_password import ChangePasswordUseCase
from .change_username import ChangeUsernameUseCase, ForceChangeUsernameUseCase
from .link_to_steam import BuildSteamLinkUrlUseCase, LinkToSteamUseCase
from .password_reset import PerformPasswordResetUseCase, RequestPasswordResetUseCase
from .register import RegisterUseCase

__all__ = [
    "ActivateUseCase",
    "BuildSteamLinkUrlUseCase",
    "ChangeEmailUseCase",
    "ChangePasswordUseCase",
    "ChangeUsernameUseCase",
    "ForceChangeUsernameUseCase",
    "LinkToSteamUseCase",
    "PerformPasswordResetUseCase",
    "RegisterUseCase",
    "RequestPasswordResetUseCase",
]
