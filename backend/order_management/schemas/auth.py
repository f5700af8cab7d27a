"""
Authentication and user schemas
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from order_management.domain.user import User


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")


PASSWORD_MIN_LENGTH = 8


class UserCreate(BaseModel):
    name: str = Field(..., max_length=255)
    email: str
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    role: Optional[str] = Field("User", description="Admin or User")


class UserUpdate(BaseModel):
    """Schema for updating a user; empty strings are treated as absent"""
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = None
    password: Optional[str] = Field(None, description="New password, hashed before storage")
    role: Optional[str] = Field(None, description="Admin or User (case-insensitive)")


class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    role: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email.value,
            role=user.role.value,
            created_at=user.created_at,
        )
