"""Booking data consumed by the notification handlers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    """Lifecycle states a booking moves through."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: "str | BookingStatus") -> "BookingStatus | None":
        """Return the exactly matching status or ``None`` for anything else."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class ProviderResponse(str, Enum):
    """Answer a provider gives to a booking request."""

    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"


@dataclass
class BookingNotificationData:
    """Snapshot of a booking request used to build notifications.

    ``client_id`` is the client's account id; ``scheduled_date`` is kept in
    the form the caller provided (usually an ISO string).
    """

    id: str
    client_id: str
    provider_id: str
    service_title: str
    scheduled_date: str | datetime
    scheduled_time: str
    location: str
    total_amount: float
    currency: str


__all__ = ["BookingNotificationData", "BookingStatus", "ProviderResponse"]
