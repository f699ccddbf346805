"""Mock mail providers for testing."""

from dishka import Scope, provide

from faf.adapter.mail import MockMailSender
from faf.domain.service import MailSender
from faf.util.di.infrastructure.mail import MailProvider


class MockMailProvider(MailProvider):
    """Mock mail provider recording sent mails."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mail_sender(self) -> MailSender:
        """Provide recording mail sender."""
        return MockMailSender()
