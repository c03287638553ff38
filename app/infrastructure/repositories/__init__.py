"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository

__all__ = [
    "NotificationRepository",
    "ProfileRepository",
]
