"""Tests for typed Clerk events."""

import pytest
from pydantic import ValidationError

from app.clerk.events import UnhandledEvent, UserCreatedEvent, UserData, parse_event
from conftest import user_created_event


def test_user_created_is_typed():
    event = parse_event(user_created_event())
    assert isinstance(event, UserCreatedEvent)
    assert event.data.id == "u1"
    assert event.data.primary_email == "a@b.com"


def test_other_types_are_unhandled():
    event = parse_event({"type": "session.created", "data": {"id": "sess_1"}})
    assert isinstance(event, UnhandledEvent)
    assert event.type == "session.created"


def test_envelope_without_type_is_rejected():
    with pytest.raises(ValidationError):
        parse_event({"data": {}})


@pytest.mark.parametrize(
    "first, last, expected",
    [
        ("Jane", "Doe", "Jane Doe"),
        ("", "Doe", "Doe"),
        (None, "Doe", "Doe"),
        ("Jane", None, "Jane"),
        ("", "", ""),
        (None, None, ""),
    ],
)
def test_full_name_is_trimmed(first, last, expected):
    assert UserData(first_name=first, last_name=last).full_name == expected


def test_first_email_is_used():
    data = UserData(
        email_addresses=[{"email_address": "first@b.com"}, {"email_address": "second@b.com"}]
    )
    assert data.primary_email == "first@b.com"


def test_null_email_list_counts_as_empty():
    data = UserData.model_validate({"id": "u1", "email_addresses": None})
    assert data.primary_email is None
    assert data.missing_fields() == ["email"]


def test_missing_fields():
    assert UserData(id="u1", email_addresses=[{"email_address": "a@b.com"}]).missing_fields() == []
    assert UserData().missing_fields() == ["id", "email"]


def test_unknown_clerk_fields_are_ignored():
    event = parse_event(user_created_event(username="jdoe", public_metadata={"plan": "pro"}))
    assert isinstance(event, UserCreatedEvent)
    assert not hasattr(event.data, "username")
