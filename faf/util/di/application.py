"""Application layer DI providers."""

from dishka import Scope, provide

from faf.application.usecase.user import (
    ActivateUseCase,
    BuildSteamLinkUrlUseCase,
    ChangeEmailUseCase,
    ChangePasswordUseCase,
    ChangeUsernameUseCase,
    ForceChangeUsernameUseCase,
    LinkToSteamUseCase,
    PerformPasswordResetUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
)
from faf.domain.service import SteamService, UserService
from faf.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Registration
    @provide
    def get_register_use_case(self, user_service: UserService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service)

    @provide
    def get_activate_use_case(self, user_service: UserService) -> ActivateUseCase:
        """Provide activate use case."""
        return ActivateUseCase(user_service=user_service)

    # Account data
    @provide
    def get_change_password_use_case(
        self, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(user_service=user_service)

    @provide
    def get_change_username_use_case(
        self, user_service: UserService
    ) -> ChangeUsernameUseCase:
        """Provide change username use case."""
        return ChangeUsernameUseCase(user_service=user_service)

    @provide
    def get_force_change_username_use_case(
        self, user_service: UserService
    ) -> ForceChangeUsernameUseCase:
        """Provide forced change username use case."""
        return ForceChangeUsernameUseCase(user_service=user_service)

    @provide
    def get_change_email_use_case(
        self, user_service: UserService
    ) -> ChangeEmailUseCase:
        """Provide change email use case."""
        return ChangeEmailUseCase(user_service=user_service)

    # Password reset
    @provide
    def get_request_password_reset_use_case(
        self, user_service: UserService
    ) -> RequestPasswordResetUseCase:
        """Provide request password reset use case."""
        return RequestPasswordResetUseCase(user_service=user_service)

    @provide
    def get_perform_password_reset_use_case(
        self, user_service: UserService
    ) -> PerformPasswordResetUseCase:
        """Provide perform password reset use case."""
        return PerformPasswordResetUseCase(user_service=user_service)

    # Steam
    @provide
    def get_build_steam_link_url_use_case(
        self, user_service: UserService
    ) -> BuildSteamLinkUrlUseCase:
        """Provide build Steam link URL use case."""
        return BuildSteamLinkUrlUseCase(user_service=user_service)

    @provide
    def get_link_to_steam_use_case(
        self, user_service: UserService, steam_service: SteamService
    ) -> LinkToSteamUseCase:
        """Provide link to Steam use case."""
        return LinkToSteamUseCase(
            user_service=user_service, steam_service=steam_service
        )
