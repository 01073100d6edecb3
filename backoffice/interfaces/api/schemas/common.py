"""Schemas shared by several endpoints."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


__all__ = ["MessageResponse"]
