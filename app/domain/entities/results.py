"""Result objects returned by the notification use cases."""

from __future__ import annotations

from dataclasses import dataclass, field

from .notification import Notification
from .resolution import RecipientResolution
from .user_type import UserType


@dataclass
class RecordedNotification:
    """A persisted notification together with how its recipient was resolved."""

    notification: Notification
    resolution: RecipientResolution

    @property
    def id(self) -> str:
        return self.notification.id

    @property
    def degraded(self) -> bool:
        return self.resolution.degraded


@dataclass
class NotificationResult:
    """Outcome of a single-recipient notification operation."""

    success: bool
    notification_id: str | None = None
    error: str | None = None


@dataclass
class FanOutResult:
    """Outcome of an event notifying both the client and the provider.

    ``success`` is true only when both rows were written. A partial failure
    keeps the row that was written unless compensation removed it.
    """

    success: bool
    client_notification_id: str | None = None
    provider_notification_id: str | None = None
    message: str | None = None
    error: str | None = None
    compensated: bool = False


@dataclass
class NotificationQueryResult:
    """Notifications visible to an account across all of its roles."""

    success: bool
    notifications: list[Notification] = field(default_factory=list)
    unread_count: int = 0
    error: str | None = None


@dataclass
class ProfileLinkReport:
    """Per-role summary of a profile linking run."""

    account_id: str
    linked: list[UserType] = field(default_factory=list)
    already_linked: list[UserType] = field(default_factory=list)
    missing: list[UserType] = field(default_factory=list)


__all__ = [
    "FanOutResult",
    "NotificationQueryResult",
    "NotificationResult",
    "ProfileLinkReport",
    "RecordedNotification",
]
