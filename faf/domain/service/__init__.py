"""Domain services."""

from .base import Service
from .email_service import EmailService, MailSender
from .event_publisher import EventBus, EventPublisher
from .jwt_service import JWTService
from .password_encoder import PasswordEncoder
from .steam_service import SteamClient, SteamService
from .token_service import TokenService
from .user_service import SteamLinkResult, UserService

__all__ = [
    "EmailService",
    "EventBus",
    "EventPublisher",
    "JWTService",
    "MailSender",
    "PasswordEncoder",
    "Service",
    "SteamClient",
    "SteamLinkResult",
    "SteamService",
    "TokenService",
    "UserService",
]
