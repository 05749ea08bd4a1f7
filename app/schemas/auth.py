# app/schemas/auth.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from app.schemas.base import RequestSchema
from app.schemas.user import NewPassword, User


class RegisterRequest(RequestSchema):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: NewPassword
    # Join an existing team, or create one (named team_name) when absent
    team_id: Optional[str] = None
    team_name: Optional[str] = None


class LoginRequest(RequestSchema):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(BaseModel):
    user: User
    jwt: str
