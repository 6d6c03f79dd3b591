"""Request base — presence checks that mirror the client contract.

Invariants:
    - A required field counts as missing when it is None, "" or 0
    - ensure_complete() raises MissingFieldsError with the operation's own message
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from langbuddy.core.errors import MissingFieldsError


class RequestBody(BaseModel):
    """Base for every JSON request body."""

    model_config = ConfigDict(extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()
    missing_message: ClassVar[str] = "Missing fields"

    def missing_fields(self) -> list[str]:
        return [name for name in self.required_fields if not getattr(self, name)]

    def ensure_complete(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise MissingFieldsError(self.missing_message, missing)
