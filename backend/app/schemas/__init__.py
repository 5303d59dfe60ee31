"""Pydantic Schemas — request/response validation at the HTTP boundary.

Invariants:
    - Schemas validate at system boundary (user input, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
