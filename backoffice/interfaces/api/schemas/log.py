"""Schemas for audit log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class LogRead(BaseModel):
    """Representation of an audit row returned by the API."""

    id: int
    user_id: int
    action: str
    data: dict[str, Any]
    active: bool
    created_on: datetime | None
    updated_on: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["LogRead"]
