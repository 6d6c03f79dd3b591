"""Domain Types — starting progress values and the patchable column set."""

from langbuddy.core.domain_types import (
    ProgressField, STARTING_HEARTS, BCRYPT_ROUNDS, UserId,
)
from langbuddy.models.user import User


def test_starting_hearts_is_five():
    assert STARTING_HEARTS == 5


def test_bcrypt_rounds_fixed():
    assert BCRYPT_ROUNDS == 10


def test_identity_type_wraps_int():
    assert UserId(3) == 3


def test_progress_fields_are_user_columns():
    columns = set(User.__table__.columns.keys())
    assert {f.value for f in ProgressField} <= columns
    assert "password" not in {f.value for f in ProgressField}
    assert "username" not in {f.value for f in ProgressField}
