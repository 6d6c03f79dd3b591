"""API Layer — FastAPI routes, response envelope and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint except GET / answers 200 with a {"success": ...} envelope
"""
