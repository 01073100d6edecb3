"""Repository implementations for infrastructure layer."""

from .log_repository import LogRepository
from .major_repository import MajorRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository

__all__ = [
    "LogRepository",
    "MajorRepository",
    "RoleRepository",
    "UserRepository",
]
