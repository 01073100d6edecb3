"""Domain entity representing a major or department."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Major:
    """Reference row describing the major a user belongs to."""

    id: int | None
    code: str
    name: str
    active: bool = True
    created_on: datetime | None = None
    updated_on: datetime | None = None


__all__ = ["Major"]
