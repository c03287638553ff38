"""Lookups across accounts, profile records and the links between them."""

from __future__ import annotations

from typing import NamedTuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Account, ProfileRecord, UserType
from app.infrastructure.models import (
    AdminModel,
    ClientModel,
    ServiceProviderModel,
    UserAdminProfileModel,
    UserClientProfileModel,
    UserModel,
    UserProviderProfileModel,
)
from app.utils import generate_record_id


class _RoleTables(NamedTuple):
    link_model: type
    link_column: str
    record_model: type


_ROLE_TABLES: dict[UserType, _RoleTables] = {
    UserType.CLIENT: _RoleTables(UserClientProfileModel, "client_id", ClientModel),
    UserType.PROVIDER: _RoleTables(UserProviderProfileModel, "provider_id", ServiceProviderModel),
    UserType.ADMIN: _RoleTables(UserAdminProfileModel, "admin_id", AdminModel),
}


class ProfileRepository:
    """Resolve and maintain the account-to-profile chain for each role."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_entity_id(self, account_id: str, user_type: UserType) -> str | None:
        """Follow account -> link -> record and return the record id."""

        tables = _ROLE_TABLES[UserType(user_type)]
        link_column = getattr(tables.link_model, tables.link_column)
        row = (
            self.session.query(tables.record_model.id)
            .join(tables.link_model, link_column == tables.record_model.id)
            .filter(tables.link_model.user_id == account_id)
            .first()
        )
        return row[0] if row else None

    def has_link(self, account_id: str, user_type: UserType) -> bool:
        tables = _ROLE_TABLES[UserType(user_type)]
        return (
            self.session.query(tables.link_model.id)
            .filter(tables.link_model.user_id == account_id)
            .first()
            is not None
        )

    def get_account(self, account_id: str) -> Account | None:
        model = self.session.get(UserModel, account_id)
        return self._account_to_entity(model) if model else None

    def get_account_by_email(self, email: str) -> Account | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._account_to_entity(model) if model else None

    def find_record_by_email(self, user_type: UserType, email: str) -> ProfileRecord | None:
        record_model = _ROLE_TABLES[UserType(user_type)].record_model
        model = (
            self.session.query(record_model)
            .filter(func.lower(record_model.email) == email.strip().lower())
            .order_by(record_model.created_at.asc())
            .first()
        )
        if model is None:
            return None
        return ProfileRecord(id=model.id, email=model.email, name=model.name)

    def create_link(self, account_id: str, user_type: UserType, record_id: str) -> str:
        tables = _ROLE_TABLES[UserType(user_type)]
        link = tables.link_model(id=generate_record_id("profile"), user_id=account_id)
        setattr(link, tables.link_column, record_id)
        self.session.add(link)
        self.session.commit()
        return link.id

    @staticmethod
    def _account_to_entity(model: UserModel) -> Account:
        return Account(
            id=model.id,
            email=model.email,
            name=model.name,
            created_at=model.created_at,
        )


__all__ = ["ProfileRepository"]
