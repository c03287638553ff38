"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a notification row.

    Column names are consumed verbatim by the inbox pages, so they keep the
    camelCase spelling.
    """

    __tablename__ = "Notification"

    id = Column(String(80), primary_key=True)
    user_id = Column("userId", String(64), nullable=False, index=True)
    user_type = Column("userType", String(20), nullable=False)
    type = Column(String(40), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    data = Column(Text, nullable=True)
    is_read = Column(
        "isRead",
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    sent_via_email = Column("sentViaEmail", Boolean, nullable=False, default=False)
    sent_via_sms = Column("sentViaSMS", Boolean, nullable=False, default=False)
    created_at = Column(
        "createdAt", DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    read_at = Column("readAt", DateTime(), nullable=True)


__all__ = ["NotificationModel"]
