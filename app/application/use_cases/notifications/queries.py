"""Read and read-state operations over an account's notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    Notification,
    NotificationQueryResult,
    NotificationResult,
    UserType,
)
from app.infrastructure.repositories import NotificationRepository

from .resolver import resolve_entity_id

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]

_ROLES: tuple[UserType, ...] = (UserType.CLIENT, UserType.PROVIDER, UserType.ADMIN)


def resolve_account_entity_ids(session_factory: SessionFactory, account_id: str) -> list[str]:
    """Resolve ``account_id`` against every role concurrently.

    Each lookup runs on its own session; a failed lookup simply contributes
    nothing. The returned ids keep the CLIENT, PROVIDER, ADMIN order.
    """

    def lookup(role: UserType) -> str | None:
        with session_factory() as session:
            return resolve_entity_id(session, account_id, role)

    with ThreadPoolExecutor(max_workers=len(_ROLES), thread_name_prefix="entity-lookup") as pool:
        resolved = list(pool.map(lookup, _ROLES))

    entity_ids: list[str] = []
    for entity_id in resolved:
        if entity_id and entity_id not in entity_ids:
            entity_ids.append(entity_id)
    return entity_ids


def get_user_notifications(
    session_factory: SessionFactory,
    account_id: str,
    *,
    limit: int | None = None,
    unread_only: bool = False,
) -> NotificationQueryResult:
    """Return the newest notifications filed under any of the account's entities."""

    if limit is None:
        limit = get_settings().notification_default_limit

    try:
        entity_ids = resolve_account_entity_ids(session_factory, account_id)
        if not entity_ids:
            logger.info("No entity ids found for account %s", account_id)
            return NotificationQueryResult(success=True)

        with session_factory() as session:
            repository = NotificationRepository(session)
            notifications = list(
                repository.list_for_users(entity_ids, limit=limit, unread_only=unread_only)
            )
            unread_count = repository.count_unread(entity_ids)
    except SQLAlchemyError as exc:
        logger.exception("Failed to fetch notifications for account %s", account_id)
        return NotificationQueryResult(success=False, error=str(exc))

    return NotificationQueryResult(
        success=True, notifications=notifications, unread_count=unread_count
    )


def get_notification(session: Session, notification_id: str) -> Notification | None:
    """Return a single notification or ``None`` if it does not exist."""

    return NotificationRepository(session).get(notification_id)


def mark_notification_as_read(session: Session, notification_id: str) -> NotificationResult:
    """Flag ``notification_id`` as read.

    No ownership check happens here; callers must make sure the requester
    owns the notification.
    """

    try:
        notification = NotificationRepository(session).mark_as_read(notification_id)
    except ValueError as exc:
        return NotificationResult(success=False, error=str(exc))
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Failed to mark notification %s as read", notification_id)
        return NotificationResult(success=False, error=str(exc))
    return NotificationResult(success=True, notification_id=notification.id)


def set_notifications_read_state(
    session: Session,
    notification_ids: Iterable[str],
    *,
    owner_ids: Sequence[str],
    is_read: bool,
) -> int:
    """Mark the given notifications read or unread, limited to ``owner_ids``."""

    updated = NotificationRepository(session).set_read_state(
        notification_ids, user_ids=owner_ids, is_read=is_read
    )
    logger.info("Marked %s notifications as %s", updated, "read" if is_read else "unread")
    return updated


def mark_all_notifications_as_read(session: Session, *, owner_ids: Sequence[str]) -> int:
    """Mark every unread notification filed under ``owner_ids`` as read."""

    updated = NotificationRepository(session).mark_all_as_read(owner_ids)
    logger.info("Marked %s notifications as read", updated)
    return updated


def delete_notification(session: Session, notification_id: str) -> bool:
    """Remove a notification; returns ``False`` when it does not exist."""

    return NotificationRepository(session).delete(notification_id)


__all__ = [
    "delete_notification",
    "get_notification",
    "get_user_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "resolve_account_entity_ids",
    "set_notifications_read_state",
]
