"""Security helpers for hashing and token generation."""

from datetime import datetime, timedelta, timezone
import secrets
import string

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from backoffice.config import Settings
from backoffice.domain.entities import ResetTokenClaims, User
from backoffice.domain.exceptions import InvalidTokenError

ALGORITHM = "HS256"
RANDOM_PASSWORD_LENGTH = 12
RANDOM_PASSWORD_ALPHABET = string.ascii_lowercase + string.digits

# ---- Hashing ----
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_random_password(length: int = RANDOM_PASSWORD_LENGTH) -> str:
    """Return a throwaway password made of lowercase letters and digits.

    New accounts never see it: they set their own password through the
    emailed reset link.
    """

    return "".join(secrets.choice(RANDOM_PASSWORD_ALPHABET) for _ in range(length))


# ---- JWT ----
def _encode(settings: Settings, claims: dict, expires_delta: timedelta) -> str:
    issued_at = datetime.now(timezone.utc)
    payload = {**claims, "iat": issued_at, "exp": issued_at + expires_delta}
    return jwt.encode(payload, settings.secret_key, algorithm=ALGORITHM)


def create_reset_token(
    settings: Settings, user: User, expires_delta: timedelta | None = None
) -> str:
    """Sign a reset token binding ``user``'s id and email."""

    return _encode(
        settings,
        {"id": user.id, "email": user.email},
        expires_delta or timedelta(hours=settings.reset_token_expire_hours),
    )


def decode_reset_token(settings: Settings, token: str) -> ResetTokenClaims:
    """Verify signature and expiry of a reset token and return its claims."""

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except JWTError as exc:
        raise InvalidTokenError() from exc

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise InvalidTokenError("Token does not identify a user")

    return ResetTokenClaims(
        user_id=user_id,
        email=str(payload.get("email") or ""),
        issued_at=_timestamp(payload.get("iat")),
        expires_at=_timestamp(payload.get("exp")),
    )


def create_access_token(
    settings: Settings, user: User, expires_delta: timedelta | None = None
) -> str:
    """Sign an access token for ``user``; used to identify the acting admin."""

    return _encode(
        settings,
        {"sub": str(user.id), "username": user.username},
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes),
    )


def decode_access_token(settings: Settings, token: str) -> dict:
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def _timestamp(value) -> datetime | None:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return None
