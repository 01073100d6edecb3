"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from backoffice.application.use_cases.audit_logs import record_log
from backoffice.domain.entities import LogAction, User, UserOperationResult
from backoffice.domain.exceptions import DuplicateUserError, UserNotFoundError
from backoffice.infrastructure.repositories import UserRepository
from backoffice.utils import now_in_app_timezone

from .validators import clean_text, ensure_references_exist, ensure_required_fields


def update_user(
    session: Session,
    *,
    user_id: int,
    username: str | None,
    fullname: str | None,
    email: str | None,
    role_id: int | None,
    major_id: int | None,
    active: bool | None = None,
    actor: User | None = None,
) -> UserOperationResult:
    """Replace every mutable field of the account identified by ``user_id``.

    ``active`` is the only optional field; when omitted the current value is
    kept.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise UserNotFoundError(user_id)

    ensure_required_fields(
        {
            "username": username,
            "fullname": fullname,
            "email": email,
            "role_id": role_id,
            "major_id": major_id,
        }
    )
    username = clean_text(username)
    email = clean_text(email)

    if repository.find_conflict(username=username, email=email, exclude_id=user_id):
        raise DuplicateUserError()

    ensure_references_exist(session, role_id=role_id, major_id=major_id)

    user = repository.update(
        replace(
            current_user,
            username=username,
            fullname=clean_text(fullname),
            email=email,
            role_id=role_id,
            major_id=major_id,
            active=current_user.active if active is None else active,
            updated_on=now_in_app_timezone(),
        )
    )

    result = UserOperationResult(user=user)
    if actor is not None and actor.id is not None:
        result.side_effects.append(
            record_log(
                session,
                actor_id=actor.id,
                action=LogAction.UPDATE_USER,
                data={"admin_username": actor.username, "updated_user_id": user_id},
            )
        )
    return result
