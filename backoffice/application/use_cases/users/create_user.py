"""Use case for creating users."""

import logging

from sqlalchemy.orm import Session

from backoffice.application.use_cases.audit_logs import record_log
from backoffice.config import Settings
from backoffice.domain.entities import LogAction, SideEffectOutcome, User, UserOperationResult
from backoffice.domain.exceptions import DuplicateUserError
from backoffice.infrastructure.email import ACCOUNT_CREATED_SUBJECT, send_reset_password_email
from backoffice.infrastructure.repositories import UserRepository
from backoffice.infrastructure.security import (
    create_reset_token,
    generate_random_password,
    get_password_hash,
)
from backoffice.utils import now_in_app_timezone

from .validators import clean_text, ensure_references_exist, ensure_required_fields

logger = logging.getLogger(__name__)


def create_user(
    session: Session,
    settings: Settings,
    *,
    username: str | None,
    fullname: str | None,
    email: str | None,
    role_id: int | None,
    major_id: int | None,
    active: bool | None = None,
    actor: User | None = None,
) -> UserOperationResult:
    """Create an account with a random password and email a set-password link.

    The welcome email and the audit row are best-effort: their outcomes are
    returned in ``side_effects`` and never undo the created account.
    """

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
    fullname = clean_text(fullname)
    email = clean_text(email)

    repository = UserRepository(session)
    if repository.find_conflict(username=username, email=email):
        raise DuplicateUserError()

    ensure_references_exist(session, role_id=role_id, major_id=major_id)

    now = now_in_app_timezone()
    user = repository.create(
        User(
            id=None,
            username=username,
            fullname=fullname,
            email=email,
            password=get_password_hash(generate_random_password()),
            role_id=role_id,
            major_id=major_id,
            active=True if active is None else active,
            created_on=now,
            updated_on=now,
        )
    )

    result = UserOperationResult(user=user)

    token = create_reset_token(settings, user)
    sent = send_reset_password_email(settings, user, token, subject=ACCOUNT_CREATED_SUBJECT)
    if not sent:
        logger.warning("Could not send the set-password email to %s", user.email)
    result.side_effects.append(
        SideEffectOutcome(
            name="email:set-password",
            succeeded=sent,
            detail=None if sent else "email delivery failed",
        )
    )

    if actor is not None and actor.id is not None:
        result.side_effects.append(
            record_log(
                session,
                actor_id=actor.id,
                action=LogAction.CREATE_USER,
                data={"admin_username": actor.username, "new_user_email": user.email},
            )
        )

    return result
