"""Persist a single notification row for a resolved recipient."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationType,
    RecordedNotification,
    UserType,
)
from app.infrastructure.repositories import NotificationRepository
from app.utils import generate_record_id, now_in_app_timezone

from .resolver import resolve_recipient

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    account_id: str,
    user_type: UserType | str,
    notification_type: NotificationType | str,
    title: str,
    message: str,
    data: dict[str, Any] | None = None,
    sent_via_email: bool = False,
    sent_via_sms: bool = False,
) -> RecordedNotification | None:
    """Write one notification for ``account_id`` acting as ``user_type``.

    When the account has no linked entity for the role the row is filed under
    the raw account id instead; the returned record's ``resolution`` tells the
    two cases apart. Returns ``None`` when the row could not be written,
    including for a role or type outside the known enums.
    """

    try:
        role = UserType(user_type)
        type_value = NotificationType(notification_type).value
    except ValueError:
        logger.error(
            "Rejected notification for account %s: unknown role %r or type %r",
            account_id,
            user_type,
            notification_type,
        )
        return None

    resolution = resolve_recipient(session, account_id, role)
    if resolution.degraded:
        logger.warning(
            "No %s entity linked to account %s; filing %s notification under the account id",
            role.value,
            account_id,
            type_value,
        )

    notification = Notification(
        id=generate_record_id(f"notif_{type_value.lower()}"),
        user_id=resolution.user_id,
        user_type=role,
        type=type_value,
        title=title,
        message=message,
        data=data or {},
        is_read=False,
        sent_via_email=sent_via_email,
        sent_via_sms=sent_via_sms,
        created_at=now_in_app_timezone(),
        read_at=None,
    )

    try:
        saved = NotificationRepository(session).create(notification)
    except (SQLAlchemyError, TypeError, ValueError):
        session.rollback()
        logger.exception(
            "Failed to create %s notification for account %s", role.value, account_id
        )
        return None

    logger.info(
        "Created %s notification %s for %s", role.value, saved.id, saved.user_id
    )
    return RecordedNotification(notification=saved, resolution=resolution)


__all__ = ["create_notification"]
