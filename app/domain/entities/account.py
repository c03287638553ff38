"""Read-only account and profile records owned by the wider platform."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Account:
    """Authentication-level user account."""

    id: str
    email: str
    name: str | None = None
    created_at: datetime | None = None


@dataclass
class ProfileRecord:
    """A Client, ServiceProvider or Admin record an account can be linked to."""

    id: str
    email: str | None
    name: str | None = None


__all__ = ["Account", "ProfileRecord"]
