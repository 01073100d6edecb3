"""Seed or clear the roles reference table from the command line."""

from __future__ import annotations

import argparse

from backoffice.config import get_settings
from backoffice.infrastructure.database import SessionLocal, initialize_database
from backoffice.infrastructure.seeders import role_seeder
from backoffice.logging_config import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load roles from a spreadsheet (up) or remove them all (down).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    up_parser = subparsers.add_parser("up", help="Insert the roles listed in the spreadsheet")
    up_parser.add_argument(
        "--path",
        default=None,
        help="Spreadsheet to read (default: ROLES_SEED_PATH setting)",
    )
    subparsers.add_parser("down", help="Delete every row from the roles table")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(get_settings())
    initialize_database()

    session = SessionLocal()
    try:
        if args.command == "up":
            inserted = role_seeder.up(session, args.path)
            print(f"Inserted {inserted} roles")
        else:
            deleted = role_seeder.down(session)
            print(f"Deleted {deleted} roles")
    finally:
        session.close()


if __name__ == "__main__":
    main()
