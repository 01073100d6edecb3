"""Common validation helpers for user use cases."""

from typing import Any, Mapping

from sqlalchemy.orm import Session

from backoffice.domain.exceptions import MissingFieldsError, ReferenceNotFoundError
from backoffice.infrastructure.repositories import MajorRepository, RoleRepository

REQUIRED_USER_FIELDS = ("username", "fullname", "email", "role_id", "major_id")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def ensure_required_fields(values: Mapping[str, Any]) -> None:
    """Raise :class:`MissingFieldsError` when a mandatory field is blank."""

    missing = [name for name in REQUIRED_USER_FIELDS if _is_blank(values.get(name))]
    if missing:
        raise MissingFieldsError(missing)


def ensure_references_exist(session: Session, *, role_id: int, major_id: int) -> None:
    """Raise :class:`ReferenceNotFoundError` for unknown role or major ids."""

    if RoleRepository(session).get(role_id) is None:
        raise ReferenceNotFoundError("role", role_id)
    if MajorRepository(session).get(major_id) is None:
        raise ReferenceNotFoundError("major", major_id)


def clean_text(value: str) -> str:
    return value.strip()
