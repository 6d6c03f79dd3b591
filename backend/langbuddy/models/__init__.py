"""ORM Models — SQLAlchemy declarative models for users, notebook and mistakes.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata
"""

from langbuddy.models.user import User  # noqa: F401
from langbuddy.models.notebook_entry import NotebookEntry  # noqa: F401
from langbuddy.models.mistake_entry import MistakeEntry  # noqa: F401
