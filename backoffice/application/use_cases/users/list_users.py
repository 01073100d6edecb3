"""Use case for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from backoffice.domain.entities import User
from backoffice.infrastructure.repositories import UserRepository


def list_users(session: Session) -> Sequence[User]:
    """Return every account together with its role and major."""

    return UserRepository(session).list()
