"""User DTOs shared across services."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class UserType(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class UserProfile(BaseModel):
    """Public view of a user account; never carries the password.

    ``email`` is plain text here: addresses are validated when accounts are
    created, and stored records are returned as they are.
    """

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    email: str
    first_name: str
    last_name: str
    phone_number: str | None = None
    is_active: bool = True
    user_type: UserType = UserType.USER
    attempts_left: int | None = None
    time_left: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    phone_number: str | None = None
