"""Use cases for appending and reading audit log rows."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.domain.entities import Log, LogAction, SideEffectOutcome
from backoffice.infrastructure.repositories import LogRepository
from backoffice.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def record_log(
    session: Session, *, actor_id: int, action: LogAction, data: dict[str, Any]
) -> SideEffectOutcome:
    """Append an audit row as a best-effort step.

    A database failure rolls the session back and is reported through the
    returned outcome instead of failing the caller's primary change.
    """

    now = now_in_app_timezone()
    entry = Log(
        id=None,
        user_id=actor_id,
        action=action.value,
        data=data,
        active=True,
        created_on=now,
        updated_on=now,
    )
    try:
        LogRepository(session).create(entry)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Could not write %s audit row for user %s: %s", action.value, actor_id, exc)
        return SideEffectOutcome(name=f"log:{action.value}", succeeded=False, detail=str(exc))
    return SideEffectOutcome(name=f"log:{action.value}", succeeded=True)


def list_logs(session: Session, *, action: str | None = None) -> list[Log]:
    """Return audit rows newest first, optionally filtered by action."""

    return LogRepository(session).list(action=action)


__all__ = ["list_logs", "record_log"]
