"""Verification of bearer JWTs and derivation of the acting principal."""

from __future__ import annotations

from typing import Any

import jwt

from ..config import get_settings
from ..domain.account import Principal, UserType


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT returning its payload.

    Parameters
    ----------
    token:
        Encoded JWT issued by the identity provider.

    Returns
    -------
    dict[str, Any]
        The decoded payload if signature and issuer checks succeed.

    Raises
    ------
    jwt.PyJWTError
        Propagated when the token is invalid, expired, or signed by another issuer.
    """

    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=["HS256"],
        audience=None,
        issuer=settings.jwt_issuer,
        options={"require": ["sub", "exp"]},
    )


def principal_from_claims(claims: dict[str, Any]) -> Principal:
    """Build a :class:`Principal` from verified claims.

    Raises ``ValueError`` when ``user_type`` names an unknown role.
    """
    return Principal(
        id=str(claims["sub"]),
        email=claims.get("email", ""),
        user_type=claims.get("user_type", UserType.USER),
    )
