"""SQLAlchemy model for the users table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from backoffice.infrastructure.database import Base
from backoffice.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a back-office account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    fullname = Column(String(120), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=True, index=True)
    major_id = Column(Integer, ForeignKey("majors.id"), nullable=True, index=True)
    active = Column(Boolean, nullable=False, default=True)
    created_on = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_on = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    role = relationship("RoleModel", lazy="joined")
    major = relationship("MajorModel", lazy="joined")


__all__ = ["UserModel"]
