"""Use case for emailing a fresh password reset link to a user."""

import logging

from sqlalchemy.orm import Session

from backoffice.application.use_cases.audit_logs import record_log
from backoffice.config import Settings
from backoffice.domain.entities import LogAction, User, UserOperationResult
from backoffice.domain.exceptions import EmailDeliveryError
from backoffice.infrastructure.email import send_reset_password_email
from backoffice.infrastructure.security import create_reset_token

from .get_user import get_user

logger = logging.getLogger(__name__)


def send_reset_password(
    session: Session,
    settings: Settings,
    user_id: int,
    *,
    actor: User | None = None,
) -> UserOperationResult:
    """Issue a new reset token for the user and email the link.

    Unlike account creation, a failed delivery is the failure of the whole
    operation and raises :class:`EmailDeliveryError`.
    """

    user = get_user(session, user_id)
    token = create_reset_token(settings, user)

    if not send_reset_password_email(settings, user, token):
        logger.error("Could not send the reset password email to %s", user.email)
        raise EmailDeliveryError(user.email)

    result = UserOperationResult(user=user)
    if actor is not None and actor.id is not None:
        result.side_effects.append(
            record_log(
                session,
                actor_id=actor.id,
                action=LogAction.SEND_RESET_PASSWORD_USER,
                data={"admin_username": actor.username, "target_user": user.username},
            )
        )
    return result
