"""Utility helpers to generate domain notifications for booking events."""

from __future__ import annotations

import logging
from datetime import date, datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    BookingNotificationData,
    BookingStatus,
    FanOutResult,
    NotificationResult,
    NotificationType,
    ProviderResponse,
    RecordedNotification,
    UserType,
)
from app.infrastructure.repositories import NotificationRepository
from app.utils import (
    ensure_app_timezone,
    format_display_date,
    now_in_app_timezone,
    parse_app_datetime,
)

from .templates import (
    GENERIC_STATUS_MESSAGE,
    GENERIC_STATUS_TITLE,
    GENERIC_STATUS_TYPE,
    STATUS_TEMPLATES,
    WELCOME_MESSAGES,
    WELCOME_TITLE,
    format_amount,
)
from .writer import create_notification

logger = logging.getLogger(__name__)

_URGENT_WINDOW_HOURS = 24
_UNKNOWN_ERROR = "Unknown error occurred"


def is_urgent_booking(
    scheduled_date: str | date | datetime | None, now: datetime | None = None
) -> bool:
    """Return ``True`` when the booking starts in the future within 24 hours."""

    scheduled = parse_app_datetime(scheduled_date)
    if scheduled is None:
        return False
    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    diff_hours = (scheduled - current).total_seconds() / 3600
    return 0 < diff_hours <= _URGENT_WINDOW_HOURS


def send_booking_request_notifications(
    session: Session,
    booking: BookingNotificationData,
    provider_account_id: str,
) -> FanOutResult:
    """Tell the client the request went out and ask the provider to respond."""

    try:
        logger.info("Creating booking request notifications for booking %s", booking.id)
        urgent = is_urgent_booking(booking.scheduled_date)

        client_record = create_notification(
            session,
            account_id=booking.client_id,
            user_type=UserType.CLIENT,
            notification_type=NotificationType.BOOKING_REQUEST,
            title="Booking Request Sent! 📨",
            message=(
                f'Your booking request for "{booking.service_title}" has been sent to the '
                "provider. You'll be notified when they respond (usually within 24 hours)."
            ),
            data={
                "bookingId": booking.id,
                "serviceTitle": booking.service_title,
                "scheduledDate": booking.scheduled_date,
                "scheduledTime": booking.scheduled_time,
                "amount": booking.total_amount,
                "currency": booking.currency,
                "status": BookingStatus.PENDING.value,
                "isUrgent": urgent,
                "nextAction": "WAIT_FOR_PROVIDER_RESPONSE",
            },
            sent_via_email=True,
        )

        provider_record = create_notification(
            session,
            account_id=provider_account_id,
            user_type=UserType.PROVIDER,
            notification_type=NotificationType.BOOKING_REQUEST,
            title="New Booking Request! 🔔",
            message=(
                f'You have a new booking request for "{booking.service_title}" on '
                f"{format_display_date(booking.scheduled_date)} at {booking.scheduled_time}. "
                "Please review and respond quickly!"
            ),
            data={
                "bookingId": booking.id,
                "clientId": booking.client_id,
                "serviceTitle": booking.service_title,
                "scheduledDate": booking.scheduled_date,
                "scheduledTime": booking.scheduled_time,
                "location": booking.location,
                "amount": booking.total_amount,
                "currency": booking.currency,
                "status": BookingStatus.PENDING.value,
                "isUrgent": urgent,
                "requiresAction": True,
                "nextAction": "ACCEPT_OR_DECLINE",
                "timeToRespond": "24 hours",
            },
            sent_via_email=True,
        )

        return _complete_fan_out(
            session,
            client_record,
            provider_record,
            success_message="Booking request notifications sent successfully",
        )
    except Exception as exc:
        logger.exception("Failed to create booking request notifications for %s", booking.id)
        return FanOutResult(success=False, error=str(exc) or _UNKNOWN_ERROR)


def send_provider_response_notification(
    session: Session,
    *,
    booking_id: str,
    client_account_id: str,
    provider_name: str,
    service_title: str,
    response: ProviderResponse | str,
    message: str | None = None,
) -> NotificationResult:
    """Tell the client whether the provider accepted or declined the request."""

    try:
        answer = ProviderResponse(str(getattr(response, "value", response)).upper())
        accepted = answer == ProviderResponse.ACCEPTED
        if accepted:
            text = (
                f"Great news! {provider_name} has accepted your booking request for "
                f'"{service_title}". Please complete your payment to confirm the booking.'
            )
        else:
            reason = (
                f"Reason: {message}" if message else "You can try booking with another provider."
            )
            text = (
                f'{provider_name} has declined your booking request for "{service_title}". '
                f"{reason}"
            )

        record = create_notification(
            session,
            account_id=client_account_id,
            user_type=UserType.CLIENT,
            notification_type=(
                NotificationType.BOOKING_CONFIRMED if accepted else NotificationType.BOOKING_CANCELLED
            ),
            title="Booking Request Accepted! ✅" if accepted else "Booking Request Declined ❌",
            message=text,
            data={
                "bookingId": booking_id,
                "serviceTitle": service_title,
                "providerName": provider_name,
                "response": answer.value,
                "providerMessage": message,
                "nextAction": "COMPLETE_PAYMENT" if accepted else "FIND_NEW_PROVIDER",
                "timestamp": now_in_app_timezone(),
            },
        )
        return _single_result(record)
    except Exception as exc:
        logger.exception("Failed to create provider response notification for %s", booking_id)
        return NotificationResult(success=False, error=str(exc) or _UNKNOWN_ERROR)


def send_status_update_notification(
    session: Session,
    *,
    booking_id: str,
    account_id: str,
    user_type: UserType | str,
    old_status: BookingStatus | str,
    new_status: BookingStatus | str,
    service_title: str,
    update_message: str | None = None,
) -> NotificationResult:
    """Notify one party that a booking moved to ``new_status``.

    Statuses without a template get the generic "Booking Status Update" copy
    and ``statusMapped`` set to ``False`` in the payload.
    """

    try:
        role = UserType(user_type)
        new_value = str(getattr(new_status, "value", new_status))
        old_value = str(getattr(old_status, "value", old_status))
        template = STATUS_TEMPLATES.get(BookingStatus.parse(new_value))

        if template is None:
            logger.warning(
                "No status template for %r on booking %s; using generic update copy",
                new_value,
                booking_id,
            )
            notification_type = GENERIC_STATUS_TYPE
            title = GENERIC_STATUS_TITLE
            text = GENERIC_STATUS_MESSAGE.format(new_status=new_value)
            send_email = False
        else:
            notification_type = template.notification_type
            title = template.title
            text = template.render(role, service_title=service_title)
            send_email = template.send_email

        if update_message:
            text = f"{text} {update_message}"

        record = create_notification(
            session,
            account_id=account_id,
            user_type=role,
            notification_type=notification_type,
            title=title,
            message=text,
            data={
                "bookingId": booking_id,
                "serviceTitle": service_title,
                "oldStatus": old_value,
                "newStatus": new_value,
                "updateMessage": update_message or "",
                "statusMapped": template is not None,
                "timestamp": now_in_app_timezone(),
            },
            sent_via_email=send_email,
        )
        return _single_result(record)
    except Exception as exc:
        logger.exception("Failed to create status update notification for %s", booking_id)
        return NotificationResult(success=False, error=str(exc) or _UNKNOWN_ERROR)


def send_payment_completion_notifications(
    session: Session,
    *,
    booking_id: str,
    client_account_id: str,
    provider_account_id: str,
    service_title: str,
    scheduled_date: str | datetime,
    scheduled_time: str,
    amount: float,
    currency: str,
) -> FanOutResult:
    """Confirm the payment to the client and announce it to the provider."""

    try:
        logger.info("Creating payment completion notifications for booking %s", booking_id)
        display_date = format_display_date(scheduled_date)
        display_amount = f"{currency} {format_amount(amount)}"

        client_record = create_notification(
            session,
            account_id=client_account_id,
            user_type=UserType.CLIENT,
            notification_type=NotificationType.PAYMENT_PROCESSED,
            title="Payment Processed Successfully! 💳",
            message=(
                f'Your payment of {display_amount} for "{service_title}" has been processed '
                f"successfully. The service is confirmed for {display_date} at {scheduled_time}."
            ),
            data={
                "bookingId": booking_id,
                "serviceTitle": service_title,
                "scheduledDate": scheduled_date,
                "scheduledTime": scheduled_time,
                "amount": amount,
                "currency": currency,
                "paymentStatus": "COMPLETED",
                "nextAction": "WAIT_FOR_SERVICE",
            },
            sent_via_email=True,
        )

        provider_record = create_notification(
            session,
            account_id=provider_account_id,
            user_type=UserType.PROVIDER,
            notification_type=NotificationType.PAYMENT_RECEIVED,
            title="Payment Received! 💰",
            message=(
                f'Payment of {display_amount} has been received for "{service_title}" '
                f"scheduled for {display_date} at {scheduled_time}. You can now contact "
                "the client to finalize service details."
            ),
            data={
                "bookingId": booking_id,
                "serviceTitle": service_title,
                "scheduledDate": scheduled_date,
                "scheduledTime": scheduled_time,
                "amount": amount,
                "currency": currency,
                "paymentStatus": "RECEIVED",
                "nextAction": "CONTACT_CLIENT",
            },
            sent_via_email=True,
        )

        return _complete_fan_out(
            session,
            client_record,
            provider_record,
            success_message="Payment notifications sent successfully",
        )
    except Exception as exc:
        logger.exception("Failed to create payment completion notifications for %s", booking_id)
        return FanOutResult(success=False, error=str(exc) or _UNKNOWN_ERROR)


def send_welcome_notification(
    session: Session,
    *,
    account_id: str,
    user_type: UserType | str,
    user_name: str,
) -> NotificationResult:
    """Greet a newly registered account with role-specific copy."""

    try:
        role = UserType(user_type)
        record = create_notification(
            session,
            account_id=account_id,
            user_type=role,
            notification_type=NotificationType.SYSTEM_ANNOUNCEMENT,
            title=WELCOME_TITLE,
            message=WELCOME_MESSAGES[role].format(name=user_name),
            data={
                "isWelcome": True,
                "userType": role.value,
                "joinedAt": now_in_app_timezone(),
            },
        )
        return _single_result(record)
    except Exception as exc:
        logger.exception("Failed to create welcome notification for account %s", account_id)
        return NotificationResult(success=False, error=str(exc) or _UNKNOWN_ERROR)


def _single_result(record: RecordedNotification | None) -> NotificationResult:
    if record is None:
        return NotificationResult(success=False, error="Notification could not be recorded")
    return NotificationResult(success=True, notification_id=record.id)


def _complete_fan_out(
    session: Session,
    client_record: RecordedNotification | None,
    provider_record: RecordedNotification | None,
    *,
    success_message: str,
) -> FanOutResult:
    """Combine the two writes of a client/provider event into one result.

    The writes are independent commits. On a partial failure the surviving
    row stays unless ``NOTIFICATION_FANOUT_COMPENSATION`` is enabled.
    """

    if client_record is not None and provider_record is not None:
        return FanOutResult(
            success=True,
            client_notification_id=client_record.id,
            provider_notification_id=provider_record.id,
            message=success_message,
        )

    survivor = client_record or provider_record
    compensated = False
    if survivor is not None and get_settings().notification_fanout_compensation:
        compensated = _compensate(session, survivor)

    return FanOutResult(
        success=False,
        client_notification_id=(
            client_record.id if client_record is not None and not compensated else None
        ),
        provider_notification_id=(
            provider_record.id if provider_record is not None and not compensated else None
        ),
        message="Some notifications failed to send",
        compensated=compensated,
    )


def _compensate(session: Session, record: RecordedNotification) -> bool:
    """Delete ``record`` after its counterpart failed to persist."""

    try:
        deleted = NotificationRepository(session).delete(record.id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to remove notification %s after partial fan-out", record.id)
        return False
    if deleted:
        logger.warning("Removed notification %s after partial fan-out failure", record.id)
    return deleted


__all__ = [
    "is_urgent_booking",
    "send_booking_request_notifications",
    "send_payment_completion_notifications",
    "send_provider_response_notification",
    "send_status_update_notification",
    "send_welcome_notification",
]
