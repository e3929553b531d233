from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from account_schemas import UserType

__all__ = ["Account", "Principal", "UserType"]


@dataclass(slots=True)
class Account:
    """Aggregate root for a user account; ``password`` holds an already-hashed secret."""

    id: str
    email: str
    first_name: str
    last_name: str
    password: str
    phone_number: str | None = None
    is_active: bool = True
    user_type: UserType = UserType.USER
    attempts_left: int = 3
    time_left: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated actor derived from verified token claims.

    ``user_type`` is coerced to :class:`UserType`, so unknown roles raise ``ValueError``.
    """

    id: str
    email: str
    user_type: UserType = UserType.USER

    def __post_init__(self) -> None:
        object.__setattr__(self, "user_type", UserType(self.user_type))
