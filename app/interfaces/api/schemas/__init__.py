"""Pydantic schemas exposed by the HTTP API."""

from .notification import (
    NotificationDeleteResponse,
    NotificationDetailResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationReadStateRequest,
    NotificationUpdateResponse,
)

__all__ = [
    "NotificationDeleteResponse",
    "NotificationDetailResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationReadStateRequest",
    "NotificationUpdateResponse",
]
