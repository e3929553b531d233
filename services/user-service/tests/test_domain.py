from __future__ import annotations

import pytest

from user_service.domain.account import Account, Principal, UserType
from user_service.domain.contracts import IdentifierType, UserIdentifierOptions
from user_service.domain.errors import InvalidArgumentError
from user_service.domain.identifiers import resolve_lookup_criteria
from user_service.domain.policy import can_mutate
from user_service.domain.shaping import summarize, without_sensitive_fields


@pytest.mark.parametrize(
    ("user_type", "principal_id", "allowed"),
    [
        (UserType.SUPER_ADMIN, "someone-else", True),
        (UserType.SUPER_ADMIN, "target", True),
        (UserType.USER, "target", True),
        (UserType.USER, "someone-else", False),
        (UserType.ADMIN, "someone-else", False),
        (UserType.ADMIN, "target", True),
    ],
)
def test_can_mutate(user_type, principal_id, allowed):
    principal = Principal(id=principal_id, email="p@example.com", user_type=user_type)
    assert can_mutate(principal, "target") is allowed


def test_resolve_lookup_criteria_by_email():
    options = UserIdentifierOptions("a@example.com", IdentifierType.EMAIL)
    assert resolve_lookup_criteria(options) == {"email": "a@example.com"}


def test_resolve_lookup_criteria_rejects_empty_identifier():
    with pytest.raises(InvalidArgumentError):
        resolve_lookup_criteria(UserIdentifierOptions("", IdentifierType.ID))


def test_resolve_lookup_criteria_rejects_unknown_type():
    with pytest.raises(InvalidArgumentError):
        resolve_lookup_criteria(UserIdentifierOptions("x", "username"))


def test_summarize_joins_names_with_single_space():
    account = Account(
        id="u1", email="a@example.com", first_name="Jane", last_name="Doe", password="secret"
    )
    summary = summarize(account)
    assert (summary.id, summary.name, summary.phone_number) == ("u1", "Jane Doe", None)


def test_without_sensitive_fields_drops_password_only():
    account = Account(
        id="u1", email="a@example.com", first_name="Jane", last_name="Doe", password="secret"
    )
    view = without_sensitive_fields(account)
    assert "password" not in view
    assert "secret" not in view.values()
    assert set(view) == {
        "id",
        "email",
        "first_name",
        "last_name",
        "phone_number",
        "is_active",
        "user_type",
        "attempts_left",
        "time_left",
        "created_at",
        "updated_at",
    }


def test_principal_coerces_role_strings():
    principal = Principal(id="p", email="p@example.com", user_type="super_admin")
    assert principal.user_type is UserType.SUPER_ADMIN


def test_principal_rejects_unknown_role():
    with pytest.raises(ValueError):
        Principal(id="p", email="p@example.com", user_type="root")
