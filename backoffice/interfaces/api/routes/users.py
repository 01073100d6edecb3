"""Routes for administering user accounts."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backoffice.application.use_cases.users import (
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    list_users as list_users_uc,
    send_reset_password as send_reset_password_uc,
    update_user as update_user_uc,
)
from backoffice.config import Settings, get_settings
from backoffice.domain.entities import User
from backoffice.domain.exceptions import EmailDeliveryError, UserNotFoundError
from backoffice.infrastructure.database import get_db
from backoffice.interfaces.api.dependencies import get_current_actor
from backoffice.interfaces.api.schemas import (
    MessageResponse,
    UserCreate,
    UserCreateResponse,
    UserRead,
    UserSummaryRead,
    UserUpdate,
    UserUpdateResponse,
)

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead])
def list_users(db: Session = Depends(get_db)):
    """Return every user with its role and major."""

    return [_to_read_model(user) for user in list_users_uc(db)]


@router.post("", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    actor: User | None = Depends(get_current_actor),
):
    """Create an account and email the new user a link to set a password."""

    try:
        result = create_user_uc(
            db,
            settings,
            username=user_in.username,
            fullname=user_in.fullname,
            email=user_in.email,
            role_id=user_in.role_id,
            major_id=user_in.major_id,
            active=user_in.active,
            actor=actor,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    for outcome in result.failed_side_effects:
        logger.warning("User %s created but %s failed", result.user.id, outcome.name)

    return UserCreateResponse(
        message="User created successfully",
        user=UserSummaryRead.model_validate(result.user),
    )


@router.put("/{user_id}", response_model=UserUpdateResponse)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    actor: User | None = Depends(get_current_actor),
):
    """Replace the data of an existing user."""

    try:
        result = update_user_uc(
            db,
            user_id=user_id,
            username=user_in.username,
            fullname=user_in.fullname,
            email=user_in.email,
            role_id=user_in.role_id,
            major_id=user_in.major_id,
            active=user_in.active,
            actor=actor,
        )
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return UserUpdateResponse(
        message="User updated successfully",
        user=_to_read_model(result.user),
    )


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    actor: User | None = Depends(get_current_actor),
):
    """Delete the user; the acting administrator cannot delete themselves."""

    try:
        delete_user_uc(db, user_id, actor=actor)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MessageResponse(message="User deleted successfully")


@router.post("/{user_id}/send-reset-password", response_model=MessageResponse)
def send_reset_password(
    user_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    actor: User | None = Depends(get_current_actor),
):
    """Email the user a fresh link to reset their password."""

    try:
        result = send_reset_password_uc(db, settings, user_id, actor=actor)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except EmailDeliveryError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc

    return MessageResponse(message=f"Reset password email sent to {result.user.email}")


__all__ = ["router"]
