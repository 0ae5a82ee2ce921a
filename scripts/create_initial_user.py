"""Utility script to create an organization and its first administrator."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from complaint_desk.application.use_cases.organizations import register_organization
from complaint_desk.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create an organization and its administrator.",
    )
    parser.add_argument(
        "--org-name",
        default="Acme",
        help="Organization name (default: Acme)",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the administrator (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the administrator (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Administrator password. Prompted for when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the organization using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        organization, admin = register_organization(
            session,
            org_name=args.org_name,
            admin_name=args.name,
            email=args.email,
            password=password,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the organization: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the organization: {exc}") from exc
    else:
        print(
            "Organization created:\n"
            f"  Organization ID: {organization.id}\n"
            f"  Name: {organization.name}\n"
            f"  Admin ID: {admin.id}\n"
            f"  Admin email: {admin.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
