"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .profiles import (
    AdminModel,
    ClientModel,
    ServiceProviderModel,
    UserAdminProfileModel,
    UserClientProfileModel,
    UserProviderProfileModel,
)
from .user import UserModel

__all__ = [
    "NotificationModel",
    "AdminModel",
    "ClientModel",
    "ServiceProviderModel",
    "UserAdminProfileModel",
    "UserClientProfileModel",
    "UserProviderProfileModel",
    "UserModel",
]
