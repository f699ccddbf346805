"""Unit tests for mail senders."""

import pytest

from faf.adapter.mail import FastMailSender, MockMailSender, SentMail
from faf.config import MailSettings


class TestFastMailSender:
    """Tests for FastMailSender."""

    @pytest.mark.asyncio
    async def test_suppressed_send_builds_plain_text_message(self):
        """Should build the message without contacting the SMTP server."""
        # Arrange
        sender = FastMailSender(MailSettings(suppress_send=True))

        # Act
        with sender.fastmail.record_messages() as outbox:
            await sender.send_mail(
                "p1@example.com", "Player1", "FAF user registration", "Hello"
            )

        # Assert
        assert len(outbox) == 1
        assert "p1@example.com" in outbox[0]["To"]
        assert outbox[0]["Subject"] == "FAF user registration"


class TestMockMailSender:
    """Tests for MockMailSender."""

    @pytest.mark.asyncio
    async def test_records_mail(self):
        sender = MockMailSender()

        await sender.send_mail("p1@example.com", "Player1", "Subject", "Body")

        assert sender.sent == [
            SentMail("p1@example.com", "Player1", "Subject", "Body")
        ]
