"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from backoffice.config import Settings, get_settings
from backoffice.domain.entities import User
from backoffice.infrastructure.database import get_db
from backoffice.infrastructure.repositories import UserRepository
from backoffice.infrastructure.security import decode_access_token

# Tokens are issued by the upstream sign-in service; requests without one
# simply have no actor.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _unauthorized(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_actor(token: str, db: Session, settings: Settings) -> User:
    """Resolve the administrator identified by ``token``."""

    try:
        payload = decode_access_token(settings, token)
    except ValueError as exc:
        raise _unauthorized() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _unauthorized() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _unauthorized("User not found")
    if not user.active:
        raise _unauthorized("Inactive user")
    return user


def get_current_actor(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User | None:
    """Return the authenticated administrator, or ``None`` for anonymous calls."""

    if not token:
        return None
    return resolve_actor(token, db, settings)
