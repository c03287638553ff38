"""Recipient roles notifications can be filed under."""

from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Role tag identifying which domain entity an account acts as."""

    CLIENT = "CLIENT"
    PROVIDER = "PROVIDER"
    ADMIN = "ADMIN"


__all__ = ["UserType"]
