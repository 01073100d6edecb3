"""Domain entity representing a user role."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Role:
    """Reference row describing a role that can be assigned to a user."""

    id: int | None
    code: str
    name: str
    active: bool = True
    created_on: datetime | None = None
    updated_on: datetime | None = None


__all__ = ["Role"]
