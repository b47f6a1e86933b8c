from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=255)


class TokenResponse(BaseModel):
    token: str
    role: Literal["user", "admin"]


class MeResponse(BaseModel):
    email: str
    role: Literal["user", "admin"]

    class Config:
        from_attributes = True


class UserOut(BaseModel):
    id: int
    email: str
    role: Literal["user", "admin"]
    created_at: datetime

    class Config:
        from_attributes = True
