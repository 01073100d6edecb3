"""Domain entities exposed by the application."""

from .log import Log, LogAction
from .major import Major
from .outcome import ResetPasswordOutcome, SideEffectOutcome, UserOperationResult
from .reset_token import ResetTokenClaims
from .role import Role
from .user import User

__all__ = [
    "Log",
    "LogAction",
    "Major",
    "ResetPasswordOutcome",
    "ResetTokenClaims",
    "Role",
    "SideEffectOutcome",
    "User",
    "UserOperationResult",
]
