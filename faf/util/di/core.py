"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from faf.config import AuthSettings, ConfigurationError, Settings
from faf.domain.model import UserUpdatedEvent
from faf.domain.service import EventBus
from faf.util.di.base import ProviderBase


async def log_user_change(event: UserUpdatedEvent) -> None:
    """Audit trail of account changes."""
    logfire.info(
        "User updated",
        user_id=str(event.user_id),
        login=event.login,
        ip_address=event.ip_address,
    )


class ProdConfigProvider(ProviderBase):
    """Settings and the application wide event bus.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment.

        Raises:
            ConfigurationError: If production runs with a placeholder secret
        """
        settings = Settings()
        if settings.environment == "production":
            missing = settings.placeholder_secrets()
            if missing:
                raise ConfigurationError(
                    f"Secrets must be configured in production: {', '.join(missing)}"
                )
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_event_bus(self) -> EventBus:
        """Provide the user change bus with its audit log subscriber."""
        event_bus = EventBus()
        event_bus.subscribe(log_user_change)
        return event_bus
