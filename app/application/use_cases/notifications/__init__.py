"""Public helpers for emitting and reading booking notifications."""

from .events import (
    is_urgent_booking,
    send_booking_request_notifications,
    send_payment_completion_notifications,
    send_provider_response_notification,
    send_status_update_notification,
    send_welcome_notification,
)
from .queries import (
    delete_notification,
    get_notification,
    get_user_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    resolve_account_entity_ids,
    set_notifications_read_state,
)
from .resolver import resolve_entity_id, resolve_recipient
from .writer import create_notification

__all__ = [
    "is_urgent_booking",
    "send_booking_request_notifications",
    "send_payment_completion_notifications",
    "send_provider_response_notification",
    "send_status_update_notification",
    "send_welcome_notification",
    "delete_notification",
    "get_notification",
    "get_user_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "resolve_account_entity_ids",
    "set_notifications_read_state",
    "resolve_entity_id",
    "resolve_recipient",
    "create_notification",
]
