"""Aggregate application use cases."""

from .notifications import (
    get_user_notifications,
    send_booking_request_notifications,
    send_payment_completion_notifications,
    send_provider_response_notification,
    send_status_update_notification,
    send_welcome_notification,
)
from .profiles import link_account_profiles

__all__ = [
    "get_user_notifications",
    "send_booking_request_notifications",
    "send_payment_completion_notifications",
    "send_provider_response_notification",
    "send_status_update_notification",
    "send_welcome_notification",
    "link_account_profiles",
]
