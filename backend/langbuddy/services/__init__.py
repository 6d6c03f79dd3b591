"""Services — one module per resource; each operation runs a single store statement.

Invariants:
    - Services raise LangBuddyError subclasses; they never build failure envelopes
    - Return value is the dict of extra success fields
"""
