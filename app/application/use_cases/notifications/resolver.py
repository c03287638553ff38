"""Map an account id and role to the entity notifications are filed under."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import RecipientResolution, Resolved, Unresolved, UserType
from app.infrastructure.repositories import ProfileRepository

logger = logging.getLogger(__name__)


def resolve_entity_id(
    session: Session, account_id: str, user_type: UserType | str
) -> str | None:
    """Return the Client, ServiceProvider or Admin id linked to ``account_id``.

    ``None`` means the chain is broken somewhere or the lookup failed; errors
    are logged and never propagated.
    """

    try:
        role = UserType(user_type)
    except ValueError:
        logger.warning("Cannot resolve entity for unknown role %r", user_type)
        return None

    try:
        return ProfileRepository(session).get_entity_id(account_id, role)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to resolve %s entity for account %s", role.value, account_id)
        return None


def resolve_recipient(
    session: Session, account_id: str, user_type: UserType | str
) -> RecipientResolution:
    """Return a tagged resolution so degraded recipients stay distinguishable.

    An unknown role never resolves, so it comes back ``Unresolved`` carrying
    the value it was given.
    """

    entity_id = resolve_entity_id(session, account_id, user_type)
    if entity_id is None:
        return Unresolved(account_id=account_id, user_type=user_type)
    return Resolved(account_id=account_id, user_type=UserType(user_type), entity_id=entity_id)


__all__ = ["resolve_entity_id", "resolve_recipient"]
