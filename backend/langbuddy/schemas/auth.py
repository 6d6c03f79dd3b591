"""Auth Schemas — signup/login bodies and the public user view."""

from datetime import date
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from langbuddy.schemas.base import RequestBody


class SignupRequest(RequestBody):
    required_fields: ClassVar[tuple[str, ...]] = ("username", "password", "language")
    missing_message: ClassVar[str] = "Missing fields"

    username: str | None = None
    password: str | None = None
    language: str | None = None


class LoginRequest(RequestBody):
    required_fields: ClassVar[tuple[str, ...]] = ("username", "password")
    missing_message: ClassVar[str] = "username and password required"

    username: str | None = None
    password: str | None = None


class UserPublic(BaseModel):
    """User row as returned by login. The password hash is never included."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    language: str
    xp: int
    hearts: int
    streak: int
    unit: int
    lesson: int
    last_day: date | None = None
