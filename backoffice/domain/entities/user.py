"""Domain entity representing a user account."""

from dataclasses import dataclass
from datetime import datetime

from .major import Major
from .role import Role


@dataclass
class User:
    """Core attributes describing a back-office user account."""

    id: int | None
    username: str
    fullname: str
    email: str
    password: str
    role_id: int | None
    major_id: int | None
    active: bool
    created_on: datetime | None
    updated_on: datetime | None
    role: Role | None = None
    major: Major | None = None


__all__ = ["User"]
