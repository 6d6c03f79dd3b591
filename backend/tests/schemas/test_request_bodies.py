"""Request Bodies — presence rules and the present-or-absent progress patch.

Tests:
    - None, "" and 0 count as missing for required fields
    - ensure_complete raises with the operation's own message
    - ProgressPatch.changes() drops absent and null fields, keeps explicit 0
    - ProgressPatch.provided() distinguishes "sent as null" from "not sent"
    - Unknown keys are ignored
"""

import pytest

from langbuddy.core.domain_types import ProgressField
from langbuddy.core.errors import MissingFieldsError
from langbuddy.schemas.auth import LoginRequest, SignupRequest
from langbuddy.schemas.entries import EntryCreate
from langbuddy.schemas.progress import ProgressOverwrite, ProgressPatch


def test_signup_missing_fields_listed():
    body = SignupRequest(username="a", password="")
    assert body.missing_fields() == ["password", "language"]


def test_signup_complete_passes():
    SignupRequest(username="a", password="b", language="en").ensure_complete()


def test_login_message():
    with pytest.raises(MissingFieldsError) as info:
        LoginRequest(username="a").ensure_complete()
    assert info.value.message == "username and password required"


def test_entry_zero_user_id_is_missing():
    with pytest.raises(MissingFieldsError) as info:
        EntryCreate(user_id=0, en="a", tr="b").ensure_complete()
    assert info.value.message == "user_id, en, tr required"
    assert info.value.fields == ["user_id"]


def test_entry_user_id_coerced_from_string():
    assert EntryCreate(user_id="5", en="a", tr="b").user_id == 5


def test_overwrite_has_no_required_fields():
    ProgressOverwrite().ensure_complete()


def test_patch_requires_id():
    with pytest.raises(MissingFieldsError) as info:
        ProgressPatch(xp=3).ensure_complete()
    assert info.value.message == "id required"


def test_patch_changes_only_present_non_null():
    patch = ProgressPatch.model_validate({"id": 1, "hearts": 3, "xp": None})
    assert patch.changes() == {ProgressField.HEARTS: 3}


def test_patch_explicit_zero_is_a_change():
    patch = ProgressPatch.model_validate({"id": 1, "xp": 0, "lesson": 0})
    assert patch.changes() == {ProgressField.XP: 0, ProgressField.LESSON: 0}


def test_patch_provided_distinguishes_null_from_absent():
    patch = ProgressPatch.model_validate({"id": 1, "xp": None})
    assert patch.provided() == {ProgressField.XP}
    assert patch.changes() == {}


def test_patch_language_change():
    patch = ProgressPatch.model_validate({"id": 1, "language": "de"})
    assert patch.changes() == {ProgressField.LANGUAGE: "de"}


def test_unknown_keys_ignored():
    body = SignupRequest.model_validate(
        {"username": "a", "password": "b", "language": "en", "admin": True},
    )
    assert not hasattr(body, "admin")
