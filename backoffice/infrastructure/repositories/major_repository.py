"""Persistence layer for majors data."""

from sqlalchemy.orm import Session

from backoffice.domain.entities import Major
from backoffice.infrastructure.models import MajorModel
from backoffice.utils import ensure_app_timezone


class MajorRepository:
    """Provide read access to majors stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> list[Major]:
        models = self.session.query(MajorModel).order_by(MajorModel.id).all()
        return [self._to_entity(model) for model in models]

    def get(self, major_id: int) -> Major | None:
        model = self.session.get(MajorModel, major_id)
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: MajorModel) -> Major:
        return Major(
            id=model.id,
            code=model.code,
            name=model.name,
            active=model.active,
            created_on=ensure_app_timezone(model.created_on),
            updated_on=ensure_app_timezone(model.updated_on),
        )


__all__ = ["MajorRepository"]
