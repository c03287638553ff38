"""Endpoints for the notification inbox of the authenticated account."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session, sessionmaker

from app.application.use_cases.notifications import (
    delete_notification,
    get_notification,
    get_user_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    resolve_account_entity_ids,
    set_notifications_read_state,
)
from app.domain.entities import Notification
from app.infrastructure.database import get_db, get_session_factory
from app.interfaces.api.dependencies import get_current_account_id
from app.interfaces.api.routes_helpers import (
    is_notification_owner,
    notification_to_schema,
    owner_ids_for,
)
from app.interfaces.api.schemas import (
    NotificationDeleteResponse,
    NotificationDetailResponse,
    NotificationListResponse,
    NotificationReadStateRequest,
    NotificationUpdateResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _account_owner_ids(session_factory: sessionmaker, account_id: str) -> list[str]:
    return owner_ids_for(account_id, resolve_account_entity_ids(session_factory, account_id))


def _get_owned_notification(
    db: Session, session_factory: sessionmaker, *, notification_id: str, account_id: str
) -> Notification:
    notification = get_notification(db, notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        )
    if not is_notification_owner(
        notification, _account_owner_ids(session_factory, account_id)
    ):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return notification


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    limit: int | None = Query(default=None, ge=1, le=100),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    session_factory: sessionmaker = Depends(get_session_factory),
    account_id: str = Depends(get_current_account_id),
) -> NotificationListResponse:
    """Return the most recent notifications for the authenticated account."""

    result = get_user_notifications(
        session_factory, account_id, limit=limit, unread_only=unread_only
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch notifications",
        )
    return NotificationListResponse(
        notifications=[notification_to_schema(n) for n in result.notifications],
        unread_count=result.unread_count,
        total=len(result.notifications),
    )


@router.put("/", response_model=NotificationUpdateResponse)
def update_notifications(
    payload: NotificationReadStateRequest,
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    account_id: str = Depends(get_current_account_id),
) -> NotificationUpdateResponse:
    """Mark a batch of the account's notifications as read or unread."""

    updated = set_notifications_read_state(
        db,
        payload.unique_ids(),
        owner_ids=_account_owner_ids(session_factory, account_id),
        is_read=payload.mark_as_read,
    )
    state = "read" if payload.mark_as_read else "unread"
    return NotificationUpdateResponse(
        message=f"Notifications marked as {state}", updated_count=updated
    )


@router.patch("/mark-all-read", response_model=NotificationUpdateResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    account_id: str = Depends(get_current_account_id),
) -> NotificationUpdateResponse:
    """Mark every unread notification of the account as read."""

    updated = mark_all_notifications_as_read(
        db, owner_ids=_account_owner_ids(session_factory, account_id)
    )
    return NotificationUpdateResponse(
        message=f"Marked {updated} notifications as read", updated_count=updated
    )


@router.patch("/{notification_id}/read", response_model=NotificationDetailResponse)
def mark_read(
    notification_id: str,
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    account_id: str = Depends(get_current_account_id),
) -> NotificationDetailResponse:
    """Mark a single notification owned by the account as read."""

    _get_owned_notification(
        db, session_factory, notification_id=notification_id, account_id=account_id
    )
    result = mark_notification_as_read(db, notification_id)
    updated = get_notification(db, notification_id) if result.success else None
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to mark notification as read",
        )
    return NotificationDetailResponse(notification=notification_to_schema(updated))


@router.delete("/{notification_id}", response_model=NotificationDeleteResponse)
def remove_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    account_id: str = Depends(get_current_account_id),
) -> NotificationDeleteResponse:
    """Delete a notification owned by the account."""

    _get_owned_notification(
        db, session_factory, notification_id=notification_id, account_id=account_id
    )
    delete_notification(db, notification_id)
    return NotificationDeleteResponse(message="Notification deleted successfully")
