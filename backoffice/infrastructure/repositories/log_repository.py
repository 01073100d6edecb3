"""Persistence layer for audit log rows."""

from typing import Iterable

from sqlalchemy.orm import Session

from backoffice.domain.entities import Log
from backoffice.infrastructure.models import LogModel
from backoffice.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class LogRepository:
    """Append and read :class:`Log` entries. Rows are never updated or deleted."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: Log) -> Log:
        model = LogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list(self, *, action: str | None = None) -> list[Log]:
        """Return audit rows newest first, optionally filtered by action."""

        query = self.session.query(LogModel)
        if action is not None:
            query = query.filter(LogModel.action == action)

        models: Iterable[LogModel] = query.order_by(LogModel.id.desc()).all()
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: LogModel) -> Log:
        return Log(
            id=model.id,
            user_id=model.user_id,
            action=model.action,
            data=dict(model.data) if model.data is not None else {},
            active=model.active,
            created_on=ensure_app_timezone(model.created_on),
            updated_on=ensure_app_timezone(model.updated_on),
        )

    @staticmethod
    def _apply_entity_to_model(model: LogModel, entry: Log) -> None:
        now = now_in_app_timezone()
        model.user_id = entry.user_id
        model.action = getattr(entry.action, "value", entry.action)
        model.data = dict(entry.data)
        model.active = entry.active
        model.created_on = ensure_app_naive_datetime(entry.created_on or now)
        model.updated_on = ensure_app_naive_datetime(entry.updated_on or now)


__all__ = ["LogRepository"]
