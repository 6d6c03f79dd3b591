"""Entry Schemas — notebook and mistake bodies and list items.

Both collections take the same {user_id, en, tr} body; the list items differ only
in that mistakes carry their logged time.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from langbuddy.schemas.base import RequestBody


class EntryCreate(RequestBody):
    required_fields: ClassVar[tuple[str, ...]] = ("user_id", "en", "tr")
    missing_message: ClassVar[str] = "user_id, en, tr required"

    user_id: int | None = None
    en: str | None = None
    tr: str | None = None


class NotebookItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    en_text: str
    tr_text: str


class MistakeItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    en_text: str
    tr_text: str
    time: datetime
