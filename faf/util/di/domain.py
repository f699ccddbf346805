"""Domain layer DI providers."""

from dishka import Scope, provide

from faf.config import AuthSettings, Settings
from faf.domain.repository import (
    AnopeUserRepository,
    GlobalRatingRepository,
    Ladder1v1RatingRepository,
    NameRecordRepository,
    UserRepository,
)
from faf.domain.service import (
    EmailService,
    EventPublisher,
    JWTService,
    MailSender,
    SteamClient,
    SteamService,
    TokenService,
    UserService,
)
from faf.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide access token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide claim token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_email_service(
        self, mail_sender: MailSender, settings: Settings
    ) -> EmailService:
        """Provide email domain service."""
        return EmailService(mail_sender=mail_sender, mail_settings=settings.mail)

    @provide
    def get_steam_service(
        self, steam_client: SteamClient, settings: Settings
    ) -> SteamService:
        """Provide Steam domain service."""
        return SteamService(
            steam_client=steam_client,
            forged_alliance_app_id=settings.steam.forged_alliance_app_id,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        name_record_repository: NameRecordRepository,
        global_rating_repository: GlobalRatingRepository,
        ladder1v1_rating_repository: Ladder1v1RatingRepository,
        anope_user_repository: AnopeUserRepository,
        token_service: TokenService,
        email_service: EmailService,
        steam_service: SteamService,
        event_publisher: EventPublisher,
        settings: Settings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            name_record_repository=name_record_repository,
            global_rating_repository=global_rating_repository,
            ladder1v1_rating_repository=ladder1v1_rating_repository,
            anope_user_repository=anope_user_repository,
            token_service=token_service,
            email_service=email_service,
            steam_service=steam_service,
            event_publisher=event_publisher,
            settings=settings,
        )
