"""Persistence layer for user accounts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from backoffice.domain.entities import Major, Role, User
from backoffice.domain.exceptions import DuplicateUserError
from backoffice.infrastructure.models import MajorModel, RoleModel, UserModel
from backoffice.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[User]:
        query = self.session.query(UserModel).options(
            joinedload(UserModel.role), joinedload(UserModel.major)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(user_id)
        return self._to_entity(model) if model else None

    def find_conflict(
        self, *, username: str, email: str, exclude_id: int | None = None
    ) -> User | None:
        """Return another account sharing ``username`` or ``email``, if any."""

        criteria = or_(UserModel.username == username, UserModel.email == email)
        if exclude_id is not None:
            criteria = and_(UserModel.id != exclude_id, criteria)
        model = self.session.query(UserModel).filter(criteria).first()
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self._commit_unique()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self._commit_unique()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self._get_model(user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _commit_unique(self) -> None:
        # The pre-check in the use cases is not atomic with the write; the
        # unique constraints settle concurrent inserts.
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateUserError() from exc

    def _get_model(self, user_id: int | None) -> UserModel | None:
        if user_id is None:
            return None
        return (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role), joinedload(UserModel.major))
            .filter(UserModel.id == user_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            fullname=model.fullname,
            email=model.email,
            password=model.password,
            role_id=model.role_id,
            major_id=model.major_id,
            active=model.active,
            created_on=ensure_app_timezone(model.created_on),
            updated_on=ensure_app_timezone(model.updated_on),
            role=UserRepository._role_to_entity(model.role),
            major=UserRepository._major_to_entity(model.major),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.created_on = ensure_app_naive_datetime(user.created_on)
        model.username = user.username
        model.fullname = user.fullname
        model.email = user.email
        model.password = user.password
        model.role_id = user.role_id
        model.major_id = user.major_id
        model.active = user.active
        model.updated_on = ensure_app_naive_datetime(user.updated_on)

    @staticmethod
    def _role_to_entity(model_role: RoleModel | None) -> Role | None:
        if model_role is None:
            return None
        return Role(
            id=model_role.id,
            code=model_role.code,
            name=model_role.name,
            active=model_role.active,
        )

    @staticmethod
    def _major_to_entity(model_major: MajorModel | None) -> Major | None:
        if model_major is None:
            return None
        return Major(
            id=model_major.id,
            code=model_major.code,
            name=model_major.name,
            active=model_major.active,
        )


__all__ = ["UserRepository"]
