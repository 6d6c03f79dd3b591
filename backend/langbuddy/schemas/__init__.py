"""Pydantic Schemas — request/response shapes for the API boundary.

Invariants:
    - One request model per operation; unknown keys are ignored
    - Required-field presence is checked by the model (ensure_complete), not the route

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
