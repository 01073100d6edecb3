"""Claims carried by a password reset token."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ResetTokenClaims:
    """Verified content of a signed reset token.

    Tokens are never persisted nor revoked; any unexpired token with a valid
    signature can be redeemed again.
    """

    user_id: int
    email: str
    issued_at: datetime | None
    expires_at: datetime | None


__all__ = ["ResetTokenClaims"]
