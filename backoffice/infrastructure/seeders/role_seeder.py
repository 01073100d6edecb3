"""Seed the ``roles`` reference table from a spreadsheet."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy.orm import Session

from backoffice.config import get_settings
from backoffice.infrastructure.repositories import RoleRepository
from backoffice.infrastructure.spreadsheet import convert_excel_to_records, transform_records
from backoffice.utils import now_in_app_naive_datetime

logger = logging.getLogger(__name__)

TABLE = "roles"


def build_rows(records: list[dict]) -> list[dict]:
    """Map spreadsheet records onto ``roles`` columns."""

    now = now_in_app_naive_datetime()
    return [
        {
            "code": item.get("code"),
            "name": item.get("name"),
            "active": item.get("active"),
            "created_on": now,
            "updated_on": now,
        }
        for item in records
    ]


def up(session: Session, path: str | Path | None = None) -> int:
    """Insert every role found in the spreadsheet at ``path``.

    Any error aborts the whole step: the session is rolled back, the error is
    logged and ``0`` is returned.
    """

    source = Path(path or get_settings().roles_seed_path)
    try:
        records = transform_records(convert_excel_to_records(source))
        inserted = RoleRepository(session).bulk_insert(build_rows(records))
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Error seeding %s from %s", TABLE, source)
        return 0

    logger.info("Seeded %s rows into %s", inserted, TABLE)
    return inserted


def down(session: Session) -> int:
    """Remove every row from ``roles``."""

    deleted = RoleRepository(session).delete_all()
    session.commit()
    logger.info("Deleted %s rows from %s", deleted, TABLE)
    return deleted


__all__ = ["build_rows", "down", "up"]
