"""Routes for reading the audit log."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backoffice.application.use_cases import list_logs as list_logs_uc
from backoffice.infrastructure.database import get_db
from backoffice.interfaces.api.schemas import LogRead

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", response_model=list[LogRead])
def list_logs(action: str | None = None, db: Session = Depends(get_db)) -> list[LogRead]:
    """Return audit rows newest first, optionally filtered by ``action``."""

    return [LogRead.model_validate(entry) for entry in list_logs_uc(db, action=action)]


__all__ = ["router"]
