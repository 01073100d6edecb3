"""Use cases for the read-only reference tables."""

from sqlalchemy.orm import Session

from backoffice.domain.entities import Major, Role
from backoffice.infrastructure.repositories import MajorRepository, RoleRepository


def list_roles(session: Session) -> list[Role]:
    return RoleRepository(session).list()


def list_majors(session: Session) -> list[Major]:
    return MajorRepository(session).list()


__all__ = ["list_majors", "list_roles"]
