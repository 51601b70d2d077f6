"""Pydantic Schemas - request validation and response shaping for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; cross-field rules live in core/
    - Wire names are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
