"""Domain entity representing a persisted notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .user_type import UserType


class NotificationType(str, Enum):
    """Event category stored in the ``type`` column."""

    BOOKING_REQUEST = "BOOKING_REQUEST"
    BOOKING_CONFIRMED = "BOOKING_CONFIRMED"
    BOOKING_CANCELLED = "BOOKING_CANCELLED"
    BOOKING_COMPLETED = "BOOKING_COMPLETED"
    BOOKING_REMINDER = "BOOKING_REMINDER"
    PAYMENT_PROCESSED = "PAYMENT_PROCESSED"
    PAYMENT_RECEIVED = "PAYMENT_RECEIVED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    REVIEW_RECEIVED = "REVIEW_RECEIVED"
    SYSTEM_ANNOUNCEMENT = "SYSTEM_ANNOUNCEMENT"


@dataclass
class Notification:
    """Message filed under a client, provider or admin record."""

    id: str
    user_id: str
    user_type: UserType
    type: str
    title: str
    message: str
    data: dict[str, Any] | None = field(default_factory=dict)
    is_read: bool = False
    sent_via_email: bool = False
    sent_via_sms: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["Notification", "NotificationType"]
