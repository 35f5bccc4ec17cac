"""
Pydantic schemas for sign-up / sign-in request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SessionUser(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class SignInResponse(BaseModel):
    user: SessionUser
    token: str
