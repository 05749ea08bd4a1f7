# app/schemas/user.py
from pydantic import AfterValidator, BaseModel, EmailStr, Field
from typing import Annotated, Optional, List
from app.core.security import BCRYPT_MAX_BYTES, password_fits
from app.models.user import UserRole
from app.schemas.base import BaseSchema, RequestSchema, TimestampMixin, OffsetMeta


def check_password_length(value: str) -> str:
    if not password_fits(value):
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    return value


# Passwords are hashed as sent, so the bcrypt input limit is enforced up front
NewPassword = Annotated[str, Field(min_length=6), AfterValidator(check_password_length)]


class User(TimestampMixin, BaseSchema):
    """A user as returned by the API. The password hash is never part of it."""
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    team_id: str
    bio: Optional[str] = None


class UserCreate(RequestSchema):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: NewPassword
    role: UserRole = UserRole.USER
    bio: Optional[str] = None


class UserUpdate(RequestSchema):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    bio: Optional[str] = None


class UserRoleUpdate(RequestSchema):
    role: UserRole


class UserList(BaseModel):
    data: List[User]
    meta: OffsetMeta


class UserEnvelope(BaseModel):
    data: User
