"""SQLAlchemy model for majors."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from backoffice.infrastructure.database import Base
from backoffice.utils import now_in_app_naive_datetime


class MajorModel(Base):
    """Database representation of the majors reference table."""

    __tablename__ = "majors"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    active = Column(Boolean, nullable=False, default=True)
    created_on = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_on = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["MajorModel"]
