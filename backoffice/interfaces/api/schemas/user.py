"""User schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ReferenceSummaryRead(BaseModel):
    id: int
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class UserWrite(BaseModel):
    """Fields accepted when creating or replacing a user.

    Presence is checked by the use cases so a missing field is reported as a
    400 with a single message.
    """

    username: str | None = Field(default=None, max_length=50)
    fullname: str | None = Field(default=None, max_length=120)
    email: EmailStr | None = None
    role_id: int | None = Field(default=None, ge=1)
    major_id: int | None = Field(default=None, ge=1)
    active: bool | None = None


class UserCreate(UserWrite):
    pass


class UserUpdate(UserWrite):
    pass


class UserSummaryRead(BaseModel):
    id: int
    username: str
    fullname: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserRead(UserSummaryRead):
    active: bool
    role: ReferenceSummaryRead | None = None
    major: ReferenceSummaryRead | None = None


class UserCreateResponse(BaseModel):
    message: str
    user: UserSummaryRead


class UserUpdateResponse(BaseModel):
    message: str
    user: UserRead
