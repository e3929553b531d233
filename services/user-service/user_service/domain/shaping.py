"""Projections of stored accounts into response payloads."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Final

from .account import Account

SENSITIVE_FIELDS: Final[frozenset[str]] = frozenset({"password"})


@dataclass(frozen=True, slots=True)
class UserSummary:
    id: str
    name: str
    phone_number: str | None


def summarize(account: Account) -> UserSummary:
    """Build the minimal view returned after a profile update."""
    return UserSummary(
        id=account.id,
        name=f"{account.first_name} {account.last_name}",
        phone_number=account.phone_number,
    )


def without_sensitive_fields(account: Account) -> dict[str, Any]:
    """Return every stored field except secrets."""
    return {
        field.name: getattr(account, field.name)
        for field in fields(account)
        if field.name not in SENSITIVE_FIELDS
    }
