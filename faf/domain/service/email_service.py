"""Email domain service."""

import logfire
from email_validator import EmailNotValidError, validate_email

from faf.config import MailSettings
from faf.domain.error import ApiError, ErrorCode

from .base import Service


class MailSender:
    """Outgoing mail interface, implemented by the mail adapter."""

    async def send_mail(
        self, to_email: str, to_name: str, subject: str, body: str
    ) -> None:
        """Deliver a plain text mail.

        Raises:
            MailDeliveryError: If the mail could not be handed over
        """
        raise NotImplementedError


class EmailService(Service):
    """Validates addresses and sends account mails."""

    def __init__(self, mail_sender: MailSender, mail_settings: MailSettings) -> None:
        """Initialize email service.

        Args:
            mail_sender: Mail delivery adapter
            mail_settings: Mail settings (subjects, validation)
        """
        self.mail_sender = mail_sender
        self.mail_settings = mail_settings

    def validate_email_address(self, email: str) -> None:
        """Check that an address is well formed and, if configured, deliverable.

        Raises:
            ApiError: EMAIL_INVALID
        """
        try:
            validate_email(
                email, check_deliverability=self.mail_settings.check_deliverability
            )
        except EmailNotValidError as e:
            logfire.info("Email address rejected", email=email, reason=str(e))
            raise ApiError.of(ErrorCode.EMAIL_INVALID, email)

    async def send_activation_mail(
        self, username: str, email: str, activation_url: str
    ) -> None:
        """Send the mail that completes a registration."""
        with logfire.span("email_service.send_activation_mail", username=username):
            body = (
                f"Dear {username},\n\n"
                "welcome to Forged Alliance Forever! Please activate your "
                "account by visiting the following link:\n\n"
                f"{activation_url}\n\n"
                "If you did not register, you can ignore this mail.\n"
            )
            await self.mail_sender.send_mail(
                email, username, self.mail_settings.activation_subject, body
            )
            logfire.info("Activation mail sent", username=username)

    async def send_password_reset_mail(
        self, username: str, email: str, password_reset_url: str
    ) -> None:
        """Send the mail that lets a user choose a new password."""
        with logfire.span("email_service.send_password_reset_mail", username=username):
            body = (
                f"Dear {username},\n\n"
                "a new password was requested for your account. Visit the "
                "following link to choose one:\n\n"
                f"{password_reset_url}\n\n"
                "If you did not request this, you can ignore this mail.\n"
            )
            await self.mail_sender.send_mail(
                email, username, self.mail_settings.password_reset_subject, body
            )
            logfire.info("Password reset mail sent", username=username)
