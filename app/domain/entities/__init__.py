"""Domain entities exposed by the application."""

from .account import Account, ProfileRecord
from .booking import BookingNotificationData, BookingStatus, ProviderResponse
from .notification import Notification, NotificationType
from .resolution import RecipientResolution, Resolved, Unresolved
from .results import (
    FanOutResult,
    NotificationQueryResult,
    NotificationResult,
    ProfileLinkReport,
    RecordedNotification,
)
from .user_type import UserType

__all__ = [
    "Account",
    "ProfileRecord",
    "BookingNotificationData",
    "BookingStatus",
    "ProviderResponse",
    "Notification",
    "NotificationType",
    "RecipientResolution",
    "Resolved",
    "Unresolved",
    "FanOutResult",
    "NotificationQueryResult",
    "NotificationResult",
    "ProfileLinkReport",
    "RecordedNotification",
    "UserType",
]
