"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from backoffice.application.use_cases.audit_logs import record_log
from backoffice.domain.entities import LogAction, User, UserOperationResult
from backoffice.domain.exceptions import SelfDeletionError, UserNotFoundError
from backoffice.infrastructure.repositories import UserRepository


def delete_user(
    session: Session, user_id: int, *, actor: User | None = None
) -> UserOperationResult:
    """Hard-delete the account; administrators cannot delete themselves."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    if actor is not None and actor.id == user_id:
        raise SelfDeletionError()

    repository.delete(user_id)

    result = UserOperationResult(user=user)
    if actor is not None and actor.id is not None:
        result.side_effects.append(
            record_log(
                session,
                actor_id=actor.id,
                action=LogAction.DELETE_USER,
                data={"admin_username": actor.username, "deleted_user": user.username},
            )
        )
    return result
