"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationReadStateRequest(BaseModel):
    """Payload used to mark a batch of notifications as read or unread."""

    model_config = ConfigDict(populate_by_name=True)

    notification_ids: list[str] = Field(..., alias="notificationIds", min_length=1)
    mark_as_read: bool = Field(..., alias="markAsRead")

    def unique_ids(self) -> list[str]:
        """Return the list of identifiers without duplicates preserving order."""

        unique: list[str] = []
        seen: set[str] = set()
        for notification_id in self.notification_ids:
            if notification_id in seen:
                continue
            seen.add(notification_id)
            unique.append(notification_id)
        return unique


class NotificationRead(BaseModel):
    """Notification row in the shape the inbox pages consume."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    user_type: str = Field(alias="userType")
    type: str
    title: str
    message: str
    data: dict[str, Any] | None = None
    is_read: bool = Field(alias="isRead")
    sent_via_email: bool = Field(alias="sentViaEmail")
    sent_via_sms: bool = Field(alias="sentViaSMS")
    created_at: datetime = Field(alias="createdAt")
    read_at: datetime | None = Field(default=None, alias="readAt")


class NotificationListResponse(BaseModel):
    """Inbox listing with the unread badge count."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    notifications: list[NotificationRead]
    unread_count: int = Field(alias="unreadCount")
    total: int


class NotificationUpdateResponse(BaseModel):
    """Outcome of a bulk read-state change."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    updated_count: int = Field(alias="updatedCount")


class NotificationDetailResponse(BaseModel):
    """Single notification after a state change."""

    success: bool = True
    notification: NotificationRead


class NotificationDeleteResponse(BaseModel):
    """Confirmation of a deleted notification."""

    success: bool = True
    message: str


__all__ = [
    "NotificationDeleteResponse",
    "NotificationDetailResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationReadStateRequest",
    "NotificationUpdateResponse",
]
