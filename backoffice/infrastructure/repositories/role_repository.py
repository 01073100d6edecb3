"""Persistence layer for roles data."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import delete, insert
from sqlalchemy.orm import Session

from backoffice.domain.entities import Role
from backoffice.infrastructure.models import RoleModel
from backoffice.utils import ensure_app_timezone


class RoleRepository:
    """Provide access to roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> list[Role]:
        models = self.session.query(RoleModel).order_by(RoleModel.id).all()
        return [self._to_entity(model) for model in models]

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def bulk_insert(self, rows: Iterable[Mapping[str, Any]]) -> int:
        """Insert ``rows`` in a single statement without committing.

        Returns the number of rows sent to the database.
        """

        payload = [dict(row) for row in rows]
        if not payload:
            return 0
        self.session.execute(insert(RoleModel), payload)
        return len(payload)

    def delete_all(self) -> int:
        """Delete every role without committing and return the affected count."""

        result = self.session.execute(delete(RoleModel))
        return result.rowcount or 0

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            code=model.code,
            name=model.name,
            active=model.active,
            created_on=ensure_app_timezone(model.created_on),
            updated_on=ensure_app_timezone(model.updated_on),
        )


__all__ = ["RoleRepository"]
