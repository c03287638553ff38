"""SQLAlchemy models for Client, ServiceProvider and Admin records and their account links."""

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class ClientModel(Base):
    """Client record notifications for the CLIENT role are filed under."""

    __tablename__ = "Client"

    id = Column(String(64), primary_key=True)
    name = Column(String(120), nullable=True)
    email = Column(String(120), nullable=True, index=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())


class ServiceProviderModel(Base):
    """Provider record notifications for the PROVIDER role are filed under."""

    __tablename__ = "ServiceProvider"

    id = Column(String(64), primary_key=True)
    name = Column(String(120), nullable=True)
    email = Column(String(120), nullable=True, index=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())


class AdminModel(Base):
    """Admin record notifications for the ADMIN role are filed under."""

    __tablename__ = "Admin"

    id = Column(String(64), primary_key=True)
    name = Column(String(120), nullable=True)
    email = Column(String(120), nullable=True, index=True)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())


class UserClientProfileModel(Base):
    """Link between an account and its Client record."""

    __tablename__ = "UserClientProfile"

    id = Column(String(64), primary_key=True)
    user_id = Column("userId", String(64), ForeignKey("User.id"), nullable=False, unique=True)
    client_id = Column("clientId", String(64), ForeignKey("Client.id"), nullable=True)

    client = relationship("ClientModel", lazy="joined")


class UserProviderProfileModel(Base):
    """Link between an account and its ServiceProvider record."""

    __tablename__ = "UserProviderProfile"

    id = Column(String(64), primary_key=True)
    user_id = Column("userId", String(64), ForeignKey("User.id"), nullable=False, unique=True)
    provider_id = Column(
        "providerId", String(64), ForeignKey("ServiceProvider.id"), nullable=True
    )

    provider = relationship("ServiceProviderModel", lazy="joined")


class UserAdminProfileModel(Base):
    """Link between an account and its Admin record."""

    __tablename__ = "UserAdminProfile"

    id = Column(String(64), primary_key=True)
    user_id = Column("userId", String(64), ForeignKey("User.id"), nullable=False, unique=True)
    admin_id = Column("adminId", String(64), ForeignKey("Admin.id"), nullable=True)

    admin = relationship("AdminModel", lazy="joined")


__all__ = [
    "AdminModel",
    "ClientModel",
    "ServiceProviderModel",
    "UserAdminProfileModel",
    "UserClientProfileModel",
    "UserProviderProfileModel",
]
