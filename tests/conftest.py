"""Shared fixtures: a throwaway SQLite database and seeded account chains."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "easybuk_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["NOTIFICATION_FANOUT_COMPENSATION"] = "false"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.models import (  # noqa: E402
    AdminModel,
    ClientModel,
    ServiceProviderModel,
    UserAdminProfileModel,
    UserClientProfileModel,
    UserModel,
    UserProviderProfileModel,
)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def session_factory():
    return SessionLocal


@pytest.fixture()
def seed_account(session):
    """Insert an account and, optionally, its linked client/provider/admin records."""

    def _seed(
        account_id: str,
        *,
        email: str | None = None,
        client_id: str | None = None,
        provider_id: str | None = None,
        admin_id: str | None = None,
    ) -> str:
        email = email or f"{account_id}@example.com"
        session.add(UserModel(id=account_id, email=email, name=account_id.title()))
        if client_id:
            session.add(ClientModel(id=client_id, email=email))
            session.add(
                UserClientProfileModel(
                    id=f"ucp_{account_id}", user_id=account_id, client_id=client_id
                )
            )
        if provider_id:
            session.add(ServiceProviderModel(id=provider_id, email=email))
            session.add(
                UserProviderProfileModel(
                    id=f"upp_{account_id}", user_id=account_id, provider_id=provider_id
                )
            )
        if admin_id:
            session.add(AdminModel(id=admin_id, email=email))
            session.add(
                UserAdminProfileModel(id=f"uap_{account_id}", user_id=account_id, admin_id=admin_id)
            )
        session.commit()
        return account_id

    return _seed
