"""Mail adapter."""

from .sender import FastMailSender, MockMailSender, SentMail

__all__ = ["FastMailSender", "MockMailSender", "SentMail"]
