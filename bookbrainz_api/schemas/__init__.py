"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format only; no persistence concerns

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
