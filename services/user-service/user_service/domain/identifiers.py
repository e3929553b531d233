"""Translate user identifiers into repository lookup criteria."""

from __future__ import annotations

from .contracts import IdentifierType, UserIdentifierOptions
from .errors import InvalidArgumentError


def resolve_lookup_criteria(options: UserIdentifierOptions) -> dict[str, str]:
    """Return a single-field criterion such as ``{"email": "a@b.c"}`` for ``find_one``."""
    if not options.identifier:
        raise InvalidArgumentError("missing identifier")
    try:
        identifier_type = IdentifierType(options.identifier_type)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"unsupported identifier type: {options.identifier_type}"
        ) from exc
    return {identifier_type.value: options.identifier}
