"""Pydantic schemas for user operations."""
from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict

from app.core.serialization import CamelModel, format_timestamp
from app.domain.users.models import User


class UserBase(CamelModel):
    """Shared attributes for user payloads."""

    email: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class UserCreate(UserBase):
    """Schema for creating a user; required fields are checked by the service."""

    pass


class UserUpdate(UserBase):
    """Schema for updating a user."""

    pass


class UserOut(CamelModel):
    """Schema for returning user data. The password hash is never exposed."""

    id: int
    email: str
    created_at: Optional[str]

    @classmethod
    def from_model(cls, user: User) -> "UserOut":
        return cls(id=user.id, email=user.email, created_at=format_timestamp(user.created_at))
