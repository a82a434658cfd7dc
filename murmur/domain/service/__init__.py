"""Domain services."""

from .auth_service import AuthService, EmailDeliveryError
from .avatar_service import AvatarProvider, AvatarService
from .base import Service
from .bot_check_service import BotCheckService, BotVerifier
from .comment_service import CommentService
from .freshness_service import FreshnessService
from .notification_service import (
    EmailMessage,
    EmailSender,
    NotificationService,
    Recipient,
    RecipientType,
)
from .rate_limit_service import RateLimitService
from .thread_service import ThreadService
from .token_service import AdminTokenService

__all__ = [
    "AdminTokenService",
    "AuthService",
    "AvatarProvider",
    "AvatarService",
    "BotCheckService",
    "BotVerifier",
    "CommentService",
    "EmailDeliveryError",
    "EmailMessage",
    "EmailSender",
    "FreshnessService",
    "NotificationService",
    "RateLimitService",
    "Recipient",
    "RecipientType",
    "Service",
    "ThreadService",
]
