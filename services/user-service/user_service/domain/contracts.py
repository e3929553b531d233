"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .account import UserType


class IdentifierType(str, Enum):
    EMAIL = "email"
    ID = "id"


@dataclass(slots=True)
class UserIdentifierOptions:
    """Identifier plus the field it should be matched against."""

    identifier: str
    identifier_type: IdentifierType | str


@dataclass(slots=True)
class CreateUserInput:
    """Inputs required to create an account; ``password`` must already be hashed."""

    email: str
    first_name: str
    last_name: str
    password: str
    phone_number: str | None = None
    user_type: UserType = UserType.USER


@dataclass(slots=True)
class UpdateUserInput:
    """Partial set of mutable profile fields; ``None`` or empty values are ignored."""

    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None


@dataclass(slots=True)
class DeactivateAccountInput:
    confirmation: bool
    reason: str | None = None
