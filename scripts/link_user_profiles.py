"""Utility script to link an account to its Client, ServiceProvider and Admin records."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.profiles import link_profiles_by_email
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for profile linking."""

    parser = argparse.ArgumentParser(
        description=(
            "Create the missing profile links of an account so its notifications "
            "resolve to the right client, provider or admin record."
        ),
    )
    parser.add_argument(
        "--email",
        required=True,
        help="E-mail address of the account; profile records are matched on it",
    )
    return parser.parse_args()


def main() -> None:
    """Link the profiles of the account given on the command line."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        report = link_profiles_by_email(session, email=args.email)
    except ValueError as exc:
        raise SystemExit(f"Could not link profiles: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while linking profiles: {exc}") from exc
    else:
        def _roles(roles) -> str:
            return ", ".join(role.value for role in roles) or "-"

        print(
            f"Profile links for account {report.account_id}:\n"
            f"  Linked: {_roles(report.linked)}\n"
            f"  Already linked: {_roles(report.already_linked)}\n"
            f"  No matching record: {_roles(report.missing)}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
