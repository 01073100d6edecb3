"""Schemas for the read-only reference tables."""

from pydantic import BaseModel, ConfigDict


class ReferenceRead(BaseModel):
    """Role or major as listed for the admin forms."""

    id: int
    code: str
    name: str
    active: bool

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ReferenceRead"]
