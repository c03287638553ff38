"""SQLAlchemy model for authentication accounts."""

from sqlalchemy import Column, DateTime, String, func

from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a platform account."""

    __tablename__ = "User"

    id = Column(String(64), primary_key=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    name = Column(String(120), nullable=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
