"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import Notification, UserType
from app.infrastructure.models import NotificationModel
from app.infrastructure.payloads import dump_payload, load_payload
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_users(
        self,
        user_ids: Sequence[str],
        *,
        limit: int | None = 20,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        if not user_ids:
            return []
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id.in_(list(user_ids))
        )
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_ids: Sequence[str]) -> int:
        if not user_ids:
            return 0
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id.in_(list(user_ids)))
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: str) -> Notification:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            msg = f"Notification with id {notification_id} not found"
            raise ValueError(msg)
        model.is_read = True
        model.read_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_read_state(
        self,
        notification_ids: Iterable[str],
        *,
        user_ids: Sequence[str],
        is_read: bool,
    ) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids or not user_ids:
            return 0
        read_at = ensure_app_naive_datetime(now_in_app_timezone()) if is_read else None
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id.in_(list(user_ids)),
            )
            .update(
                {NotificationModel.is_read: is_read, NotificationModel.read_at: read_at},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, user_ids: Sequence[str]) -> int:
        if not user_ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id.in_(list(user_ids)),
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: ensure_app_naive_datetime(
                        now_in_app_timezone()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: str) -> bool:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.id = notification.id
        model.user_id = notification.user_id
        model.user_type = UserType(notification.user_type).value
        model.type = notification.type
        model.title = notification.title
        model.message = notification.message
        model.data = dump_payload(notification.data)
        model.is_read = notification.is_read
        model.sent_via_email = notification.sent_via_email
        model.sent_via_sms = notification.sent_via_sms
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.read_at = ensure_app_naive_datetime(notification.read_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            user_type=UserType(model.user_type),
            type=model.type,
            title=model.title,
            message=model.message,
            data=load_payload(model.data),
            is_read=bool(model.is_read),
            sent_via_email=bool(model.sent_via_email),
            sent_via_sms=bool(model.sent_via_sms),
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
