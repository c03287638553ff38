"""Helper utilities shared across API route handlers."""

from collections.abc import Sequence

from app.domain.entities import Notification, UserType
from app.interfaces.api.schemas import NotificationRead


def owner_ids_for(account_id: str, entity_ids: Sequence[str]) -> list[str]:
    """Return every ``userId`` value a notification of the account may carry.

    Rows written while the account had no linked entity are filed under the
    raw account id, so it is included after the resolved entity ids.
    """

    owners = [entity_id for entity_id in entity_ids if entity_id]
    if account_id not in owners:
        owners.append(account_id)
    return owners


def is_notification_owner(notification: Notification, owner_ids: Sequence[str]) -> bool:
    """Return ``True`` when ``notification`` is filed under one of ``owner_ids``."""

    return notification.user_id in owner_ids


def notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id,
        user_id=notification.user_id,
        user_type=UserType(notification.user_type).value,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        data=notification.data,
        is_read=notification.is_read,
        sent_via_email=notification.sent_via_email,
        sent_via_sms=notification.sent_via_sms,
        created_at=notification.created_at,
        read_at=notification.read_at,
    )
