"""Create missing account-to-profile links by matching e-mail addresses."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import ProfileLinkReport, UserType
from app.infrastructure.repositories import ProfileRepository

logger = logging.getLogger(__name__)


def link_account_profiles(session: Session, *, account_id: str) -> ProfileLinkReport:
    """Link ``account_id`` to every profile record sharing its e-mail.

    Roles that already have a link are left untouched. Raises ``ValueError``
    when the account does not exist.
    """

    repository = ProfileRepository(session)
    account = repository.get_account(account_id)
    if account is None:
        raise ValueError(f"Account with id {account_id} not found")

    report = ProfileLinkReport(account_id=account.id)
    for role in UserType:
        if repository.has_link(account.id, role):
            report.already_linked.append(role)
            continue

        record = repository.find_record_by_email(role, account.email)
        if record is None:
            report.missing.append(role)
            continue

        link_id = repository.create_link(account.id, role, record.id)
        logger.info(
            "Linked account %s to %s record %s (%s)", account.id, role.value, record.id, link_id
        )
        report.linked.append(role)

    return report


def link_profiles_by_email(session: Session, *, email: str) -> ProfileLinkReport:
    """Look the account up by ``email`` and link its profiles."""

    account = ProfileRepository(session).get_account_by_email(email)
    if account is None:
        raise ValueError(f"No account registered with email {email}")
    return link_account_profiles(session, account_id=account.id)


__all__ = ["link_account_profiles", "link_profiles_by_email"]
