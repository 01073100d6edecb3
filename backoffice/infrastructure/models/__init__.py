"""ORM models used by the application infrastructure."""

from .log import LogModel
from .major import MajorModel
from .role import RoleModel
from .user import UserModel

__all__ = [
    "LogModel",
    "MajorModel",
    "RoleModel",
    "UserModel",
]
