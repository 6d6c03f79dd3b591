"""Error Hierarchy — typed, categorized exceptions for every Language Buddy failure mode.

Invariants:
    - Every error has a message (str), code (str), category and severity
    - to_envelope() always yields {"success": False, "error": message}, nothing else
    - Store details never reach the message; they are logged where they occur

Design Decisions:
    - Single hierarchy with LangBuddyError base: one global handler renders all of them
    - Messages are part of the response contract: clients compare them verbatim
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories used in logs."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to log records, never to responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    username: str | None = None
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


class LangBuddyError(Exception):
    """Base exception for all Language Buddy errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_envelope(self) -> dict:
        """Convert to the failure envelope returned to callers."""
        return {"success": False, "error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the log record."""
        return {
            "error_code": self.code,
            "category": self.category.value,
            "username": self.context.username,
            "user_id": self.context.user_id,
        }


# ─── Validation ──────────────────────────────────────────────────

class MissingFieldsError(LangBuddyError):
    """A required request field was absent or empty."""
    def __init__(self, message: str = "Missing fields", fields: list[str] | None = None):
        super().__init__(
            message, "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING,
        )
        self.fields = fields or []


# ─── Authentication ──────────────────────────────────────────────

class UserNotFoundError(LangBuddyError):
    def __init__(self, username: str):
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, ErrorContext(username=username),
        )


class WrongPasswordError(LangBuddyError):
    def __init__(self, username: str):
        super().__init__(
            "Wrong password", "WRONG_PASSWORD", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.INFO, ErrorContext(username=username),
        )


class AuthVerificationError(LangBuddyError):
    """Stored hash could not be checked (corrupt or foreign format)."""
    def __init__(self, username: str):
        super().__init__(
            "Auth error", "AUTH_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.ERROR, ErrorContext(username=username),
        )


class PasswordHashingError(LangBuddyError):
    def __init__(self, username: str):
        super().__init__(
            "Password hashing error", "HASH_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, ErrorContext(username=username),
        )


# ─── Not found ───────────────────────────────────────────────────

class NoteNotFoundError(LangBuddyError):
    """Delete matched zero notebook rows."""
    def __init__(self, note_id: int):
        super().__init__(
            "Note not found", "NOTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ErrorContext(debug_info={"note_id": note_id}),
        )
        self.note_id = note_id


# ─── Store ───────────────────────────────────────────────────────

class StoreError(LangBuddyError):
    """Relational store failure collapsed into a per-operation message."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation

    def log_extra(self) -> dict:
        return {**super().log_extra(), "operation": self.operation}
