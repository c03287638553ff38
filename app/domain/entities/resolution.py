"""Outcome of mapping an account id to the entity notifications are filed under."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .user_type import UserType


@dataclass(frozen=True)
class Resolved:
    """The account is linked to a domain entity of the requested role."""

    account_id: str
    user_type: UserType
    entity_id: str

    degraded = False

    @property
    def user_id(self) -> str:
        return self.entity_id


@dataclass(frozen=True)
class Unresolved:
    """No linked entity was found; the raw account id stands in for it."""

    account_id: str
    user_type: UserType | str

    degraded = True

    @property
    def user_id(self) -> str:
        return self.account_id


RecipientResolution = Union[Resolved, Unresolved]


__all__ = ["RecipientResolution", "Resolved", "Unresolved"]
