"""User service orchestrating lookups, authorized updates, and deactivation."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, fields, replace
from typing import Any

from pydantic import EmailStr, TypeAdapter, ValidationError

from .account import Account, Principal
from .contracts import (
    CreateUserInput,
    DeactivateAccountInput,
    UpdateUserInput,
    UserIdentifierOptions,
)
from .errors import ForbiddenError, InvalidArgumentError, NotFoundError, PersistenceConflictError
from .identifiers import resolve_lookup_criteria
from .policy import can_mutate
from .shaping import UserSummary, summarize, without_sensitive_fields
from ..repository import UserRepository

logger = logging.getLogger(__name__)

UPDATE_SUCCESS_MESSAGE = "User Updated Successfully"
DEACTIVATION_SUCCESS_MESSAGE = "Account Deactivated Successfully"

_EMAIL = TypeAdapter(EmailStr)


@dataclass(slots=True)
class UpdateResult:
    """Outcome of a successful profile update."""

    status: str
    message: str
    user: UserSummary


@dataclass(slots=True)
class DeactivationResult:
    is_active: bool
    message: str


class UserService:
    """Account workflows backed by a ``find_one``/``save`` repository."""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def create_user(self, payload: CreateUserInput) -> Account:
        """Persist a new active account; the password must already be hashed."""
        try:
            email = _EMAIL.validate_python(payload.email)
        except ValidationError as exc:
            raise InvalidArgumentError(f"invalid email: {payload.email}") from exc

        account = Account(
            id=str(uuid.uuid4()),
            email=email,
            first_name=payload.first_name,
            last_name=payload.last_name,
            password=payload.password,
            phone_number=payload.phone_number,
            user_type=payload.user_type,
        )
        saved = self._repository.save(account)
        logger.info("user created id=%s", saved.id)
        return saved

    def get_user_record(self, options: UserIdentifierOptions) -> Account | None:
        """Return the stored record verbatim, password included.

        Intended for trusted internal callers only. Repository errors propagate
        unchanged and a missing record yields ``None``.
        """
        criteria = resolve_lookup_criteria(options)
        return self._repository.find_one(criteria)

    def update_user(
        self, user_id: str, payload: UpdateUserInput, principal: Principal
    ) -> UpdateResult:
        """Apply a partial profile update on behalf of ``principal``.

        Raises
        ------
        InvalidArgumentError
            When ``user_id`` is empty, or (as ``PersistenceConflictError``) when the
            repository rejects the write.
        NotFoundError
            When no account has the given id.
        ForbiddenError
            When the principal is neither privileged nor the account owner.
        """
        if not user_id:
            raise InvalidArgumentError("missing userId")

        account = self._load(user_id)
        if not can_mutate(principal, account.id):
            logger.warning(
                "update denied principal=%s user_type=%s target=%s",
                principal.id,
                principal.user_type.value,
                user_id,
            )
            raise ForbiddenError()

        merged = replace(account, **_changed_fields(payload))
        try:
            saved = self._repository.save(merged)
        except Exception as exc:
            logger.warning("update rejected by storage target=%s: %s", user_id, exc)
            raise PersistenceConflictError(f"could not update user: {exc}") from exc

        logger.info("user updated target=%s by=%s", user_id, principal.id)
        return UpdateResult(
            status="success",
            message=UPDATE_SUCCESS_MESSAGE,
            user=summarize(saved),
        )

    def deactivate_user(
        self, user_id: str, payload: DeactivateAccountInput
    ) -> DeactivationResult:
        """Mark the account inactive; there is no way back within this service."""
        if not payload.confirmation:
            raise InvalidArgumentError("deactivation must be confirmed")

        account = self._load(user_id)
        self._repository.save(replace(account, is_active=False))
        logger.info("user deactivated target=%s reason=%r", user_id, payload.reason)
        return DeactivationResult(is_active=False, message=DEACTIVATION_SUCCESS_MESSAGE)

    def get_user_data_without_password_by_id(self, user_id: str) -> dict[str, dict[str, Any]]:
        """Return ``{"user": ...}`` holding every stored field except secrets."""
        account = self._load(user_id)
        return {"user": without_sensitive_fields(account)}

    def _load(self, user_id: str) -> Account:
        account = self._repository.find_one({"id": user_id})
        if account is None:
            raise NotFoundError()
        return account


def _changed_fields(payload: UpdateUserInput) -> dict[str, Any]:
    return {
        field.name: getattr(payload, field.name)
        for field in fields(payload)
        if getattr(payload, field.name) not in (None, "")
    }
