"""SQLAlchemy model for audit rows."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from backoffice.infrastructure.database import Base
from backoffice.utils import now_in_app_naive_datetime

_log_json_type = JSON().with_variant(JSONB(), "postgresql")


class LogModel(Base):
    """Database representation of audit events."""

    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)
    # Plain integer: rows must outlive hard-deleted actors.
    user_id = Column(Integer, nullable=False, index=True)
    action = Column(String(50), nullable=False, index=True)
    data = Column(_log_json_type, nullable=False, default=dict)
    active = Column(Boolean, nullable=False, default=True)
    created_on = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_on = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["LogModel"]
