"""Error taxonomy raised by the user domain and mapped to HTTP statuses at the boundary."""

from __future__ import annotations

from typing import Any


class UserServiceError(Exception):
    """Base class for failures the user service classifies itself."""

    status_code: int = 500
    default_code: str = "USER_SERVICE_ERROR"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def to_dict(self) -> dict[str, Any]:
        """Return the error body exposed to API consumers."""
        return {"status_code": self.status_code, "error": self.message}


class InvalidArgumentError(UserServiceError):
    """Input is missing, malformed, or could not be persisted."""

    status_code = 400
    default_code = "INVALID_ARGUMENT"


class PersistenceConflictError(InvalidArgumentError):
    """The repository rejected a write; still reported to clients as a bad request."""

    default_code = "PERSISTENCE_CONFLICT"


class NotFoundError(UserServiceError):
    status_code = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class ForbiddenError(UserServiceError):
    status_code = 403
    default_code = "FORBIDDEN"

    def __init__(self, message: str = "You are not allowed to modify this user") -> None:
        super().__init__(message)
