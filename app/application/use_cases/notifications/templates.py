"""Message copy for the notification events."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities import BookingStatus, NotificationType, UserType


@dataclass(frozen=True)
class StatusTemplate:
    """Copy and flags used when a booking reaches a given status."""

    notification_type: NotificationType
    title: str
    client_message: str
    provider_message: str
    send_email: bool

    def render(self, user_type: UserType, *, service_title: str) -> str:
        template = (
            self.client_message if user_type == UserType.CLIENT else self.provider_message
        )
        return template.format(service_title=service_title)


STATUS_TEMPLATES: dict[BookingStatus, StatusTemplate] = {
    BookingStatus.CONFIRMED: StatusTemplate(
        notification_type=NotificationType.BOOKING_CONFIRMED,
        title="Booking Confirmed! ✅",
        client_message=(
            'Your booking for "{service_title}" has been confirmed! '
            "The provider will contact you soon."
        ),
        provider_message=(
            'You have confirmed the booking for "{service_title}". '
            "Please contact the client to finalize details."
        ),
        send_email=True,
    ),
    BookingStatus.IN_PROGRESS: StatusTemplate(
        notification_type=NotificationType.BOOKING_CONFIRMED,
        title="Service Started! 🚀",
        client_message=(
            'Your service "{service_title}" has started. '
            "The provider is now working on your request."
        ),
        provider_message=(
            'You have started working on "{service_title}". '
            "Remember to mark it complete when finished."
        ),
        send_email=False,
    ),
    BookingStatus.COMPLETED: StatusTemplate(
        notification_type=NotificationType.BOOKING_CONFIRMED,
        title="Service Completed! ✅",
        client_message=(
            'Your service "{service_title}" has been completed! '
            "Please leave a review and rating."
        ),
        provider_message=(
            'You have completed the service "{service_title}". '
            "Payment will be released to your account soon."
        ),
        send_email=True,
    ),
    BookingStatus.CANCELLED: StatusTemplate(
        notification_type=NotificationType.BOOKING_CANCELLED,
        title="Booking Cancelled ❌",
        client_message=(
            'Your booking for "{service_title}" has been cancelled. '
            "Any payments will be refunded."
        ),
        provider_message=(
            'The booking for "{service_title}" has been cancelled. '
            "You are now available for this time slot."
        ),
        send_email=True,
    ),
}

GENERIC_STATUS_TYPE = NotificationType.BOOKING_CONFIRMED
GENERIC_STATUS_TITLE = "Booking Status Update"
GENERIC_STATUS_MESSAGE = "Your booking status has been updated to: {new_status}"

WELCOME_TITLE = "Welcome to EasyBuk! 🎉"
WELCOME_MESSAGES: dict[UserType, str] = {
    UserType.CLIENT: (
        "Welcome to EasyBuk, {name}! 🎉 You can now browse and book amazing "
        "services from verified providers. Start exploring!"
    ),
    UserType.PROVIDER: (
        "Welcome to EasyBuk, {name}! 🎉 Complete your provider profile to start "
        "receiving booking requests and grow your business."
    ),
    UserType.ADMIN: (
        "Welcome to EasyBuk, {name}! 🎉 Your administrator account is ready. "
        "Head to the admin dashboard to review bookings and disputes."
    ),
}


def format_amount(amount: float | int | Decimal | str) -> str:
    """Render ``amount`` the way the booking pages print it (``150``, ``99.5``)."""

    if isinstance(amount, bool):
        return str(amount)
    if isinstance(amount, (int, float, Decimal)):
        if isinstance(amount, int) or amount == int(amount):
            return str(int(amount))
        return str(float(amount))
    return str(amount)


__all__ = [
    "GENERIC_STATUS_MESSAGE",
    "GENERIC_STATUS_TITLE",
    "GENERIC_STATUS_TYPE",
    "STATUS_TEMPLATES",
    "StatusTemplate",
    "WELCOME_MESSAGES",
    "WELCOME_TITLE",
    "format_amount",
]
