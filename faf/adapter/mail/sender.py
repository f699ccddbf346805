"""SMTP mail delivery via fastapi-mail."""

from dataclasses import dataclass

import logfire
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from fastapi_mail.errors import ConnectionErrors

from faf.adapter.error import MailDeliveryError
from faf.config import MailSettings
from faf.domain.service.email_service import MailSender


class FastMailSender(MailSender):
    """Sends plain text mail through the configured SMTP server."""

    def __init__(self, settings: MailSettings) -> None:
        """Initialize sender.

        Args:
            settings: Mail settings with SMTP connection details
        """
        password = settings.smtp_password.get_secret_value() if settings.smtp_password else ""
        config = ConnectionConfig(
            MAIL_USERNAME=settings.smtp_username or "",
            MAIL_PASSWORD=password,
            MAIL_FROM=settings.from_email,
            MAIL_FROM_NAME=settings.from_name,
            MAIL_SERVER=settings.smtp_host,
            MAIL_PORT=settings.smtp_port,
            MAIL_STARTTLS=settings.smtp_starttls,
            MAIL_SSL_TLS=settings.smtp_ssl_tls,
            USE_CREDENTIALS=bool(settings.smtp_username and password),
            VALIDATE_CERTS=True,
            SUPPRESS_SEND=1 if settings.suppress_send else 0,
        )
        self.fastmail = FastMail(config)
        self.suppress_send = settings.suppress_send

    async def send_mail(
        self, to_email: str, to_name: str, subject: str, body: str
    ) -> None:
        message = MessageSchema(
            subject=subject,
            recipients=[to_email],
            body=body,
            subtype=MessageType.plain,
        )

        try:
            await self.fastmail.send_message(message)
        except ConnectionErrors as e:
            logfire.error("Mail delivery failed", to_name=to_name, error=str(e))
            raise MailDeliveryError(f"Could not deliver mail: {e}")

        logfire.info(
            "Mail handed to SMTP server",
            to_name=to_name,
            subject=subject,
            suppressed=self.suppress_send,
        )


@dataclass(frozen=True)
class SentMail:
    """A mail captured by MockMailSender."""

    to_email: str
    to_name: str
    subject: str
    body: str


class MockMailSender(MailSender):
    """Mock mail sender for testing. Records mails instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[SentMail] = []

    async def send_mail(
        self, to_email: str, to_name: str, subject: str, body: str
    ) -> None:
        self.sent.append(SentMail(to_email, to_name, subject, body))
