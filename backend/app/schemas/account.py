from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.models.enums import Role


class RegisterRequest(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=6, max_length=72)
    phone_number: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=200)


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResponse(BaseModel):
    id: int
    full_name: str
    email: str
    role: Role
    access_token: str
    token_type: str = "bearer"


class AccountResponse(BaseModel):
    id: int
    full_name: str
    email: str
    role: Role
    phone_number: Optional[str] = None
    address: Optional[str] = None
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
