"""NotebookEntry ORM — a saved English/target-language pair.

Invariants:
    - user_id is a plain column, no foreign key constraint
    - The only entity with a delete lifecycle (DELETE /api/notebook/delete/{id})
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from langbuddy.db.base import Base


class NotebookEntry(Base):
    __tablename__ = "notebook"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    en_text: Mapped[str] = mapped_column(Text, nullable=False)
    tr_text: Mapped[str] = mapped_column(Text, nullable=False)
