"""Mail infrastructure providers."""

from dishka import Scope, provide

from faf.adapter.mail import FastMailSender
from faf.config import ConfigurationError, Settings
from faf.domain.service import MailSender
from faf.util.di.base import ProviderBase


class MailProvider(ProviderBase):
    """Mail component base."""

    __mock_component__ = "mail"


class ProdMailProvider(MailProvider):
    """Production mail provider using SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_mail_sender(self, settings: Settings) -> MailSender:
        """Provide SMTP mail sender.

        Raises:
            ConfigurationError: If production would silently drop mails
        """
        if settings.environment == "production" and settings.mail.suppress_send:
            raise ConfigurationError("Mail sending must not be suppressed in production")

        return FastMailSender(settings.mail)
