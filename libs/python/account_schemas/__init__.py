"""Shared schema exports."""

from .user import UserProfile, UserSummary, UserType

__all__ = [
    "UserProfile",
    "UserSummary",
    "UserType",
]
