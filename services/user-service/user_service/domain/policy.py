"""Access control rules for account mutations."""

from __future__ import annotations

from typing import Final

from .account import Principal, UserType

PRIVILEGED_USER_TYPES: Final[frozenset[UserType]] = frozenset({UserType.SUPER_ADMIN})


def can_mutate(principal: Principal, target_id: str) -> bool:
    """Return ``True`` when the principal may change the target account.

    Privileged roles may change any account; everyone else only their own.
    Callers must confirm the target exists before asking.
    """
    if principal.user_type in PRIVILEGED_USER_TYPES:
        return True
    return principal.id == target_id
