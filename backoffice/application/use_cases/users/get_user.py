"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from backoffice.domain.entities import User
from backoffice.domain.exceptions import UserNotFoundError
from backoffice.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise :class:`UserNotFoundError`."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
