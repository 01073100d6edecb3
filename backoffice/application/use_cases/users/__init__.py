"""Use cases for managing users."""

from .create_user import create_user
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .reset_password import reset_password
from .send_reset_password import send_reset_password
from .update_user import update_user

__all__ = [
    "create_user",
    "delete_user",
    "get_user",
    "list_users",
    "reset_password",
    "send_reset_password",
    "update_user",
]
