"""Domain entity representing an append-only audit row."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class LogAction(str, Enum):
    """Actions recorded in the audit log."""

    CREATE_USER = "create-user"
    UPDATE_USER = "update-user"
    DELETE_USER = "delete-user"
    SEND_RESET_PASSWORD_USER = "send-reset-password-user"
    RESET_PASSWORD = "reset-password"


@dataclass
class Log:
    """Who did what, with a free-form payload."""

    id: int | None
    user_id: int
    action: str
    data: dict[str, Any] = field(default_factory=dict)
    active: bool = True
    created_on: datetime | None = None
    updated_on: datetime | None = None


__all__ = ["Log", "LogAction"]
