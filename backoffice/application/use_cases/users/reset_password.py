"""Use case to redeem a reset token and set a new password."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from backoffice.application.use_cases.audit_logs import record_log
from backoffice.config import Settings
from backoffice.domain.entities import LogAction, ResetPasswordOutcome
from backoffice.domain.exceptions import InvalidTokenError
from backoffice.infrastructure.repositories import UserRepository
from backoffice.infrastructure.security import decode_reset_token, get_password_hash
from backoffice.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

MISSING_TOKEN_MESSAGE = "Invalid token."
MISSING_FIELDS_MESSAGE = "Password and confirmation are required."
INVALID_TOKEN_MESSAGE = "Token is invalid or has expired."
USER_NOT_FOUND_MESSAGE = "User not found."
MISMATCH_MESSAGE = "Password and confirmation do not match."
TOO_SHORT_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."


def reset_password(
    session: Session,
    settings: Settings,
    *,
    token: str | None,
    password: str | None,
    confirm_password: str | None,
) -> ResetPasswordOutcome:
    """Validate the submitted form and store the new password.

    Checks run in a fixed order and the first failing one decides the
    message. On success the change is always audited with the token's subject
    as the actor.
    """

    if not token:
        return ResetPasswordOutcome.failure(MISSING_TOKEN_MESSAGE)

    if not password or not confirm_password:
        return ResetPasswordOutcome.failure(MISSING_FIELDS_MESSAGE)

    try:
        claims = decode_reset_token(settings, token)
    except InvalidTokenError as exc:
        logger.info("Rejected reset token: %s", exc)
        return ResetPasswordOutcome.failure(INVALID_TOKEN_MESSAGE)

    repository = UserRepository(session)
    user = repository.get(claims.user_id)
    if user is None:
        return ResetPasswordOutcome.failure(USER_NOT_FOUND_MESSAGE)

    if user.email.lower() != claims.email.lower():
        logger.info("Reset token for user %s was issued to a previous email", user.id)
        return ResetPasswordOutcome.failure(INVALID_TOKEN_MESSAGE)

    if password != confirm_password:
        return ResetPasswordOutcome.failure(MISMATCH_MESSAGE)

    if len(password) < MIN_PASSWORD_LENGTH:
        return ResetPasswordOutcome.failure(TOO_SHORT_MESSAGE)

    updated_user = repository.update(
        replace(user, password=get_password_hash(password), updated_on=now_in_app_timezone())
    )

    record_log(
        session,
        actor_id=updated_user.id,
        action=LogAction.RESET_PASSWORD,
        data={"username": updated_user.username},
    )
    return ResetPasswordOutcome.success(updated_user)


__all__ = ["MIN_PASSWORD_LENGTH", "reset_password"]
