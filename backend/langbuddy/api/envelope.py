"""Response Envelope — the uniform {"success": ...} wrapper.

Invariants:
    - Success: {"success": True, **fields}
    - Failure: {"success": False, "error": message} and nothing else
    - HTTP status is 200 either way
"""


def ok(fields: dict | None = None) -> dict:
    return {"success": True, **(fields or {})}


def fail(error: str) -> dict:
    return {"success": False, "error": error}
