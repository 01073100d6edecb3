from .common import MessageResponse
from .log import LogRead
from .reference import ReferenceRead
from .user import (
    ReferenceSummaryRead,
    UserCreate,
    UserCreateResponse,
    UserRead,
    UserSummaryRead,
    UserUpdate,
    UserUpdateResponse,
)

__all__ = [
    "LogRead",
    "MessageResponse",
    "ReferenceRead",
    "ReferenceSummaryRead",
    "UserCreate",
    "UserCreateResponse",
    "UserRead",
    "UserSummaryRead",
    "UserUpdate",
    "UserUpdateResponse",
]
