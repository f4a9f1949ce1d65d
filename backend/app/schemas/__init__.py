"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (every route declares response_model)

Design Decisions:
    - Separate from models: schemas are API contracts, models are host table mappings (ADR: DDD boundary)
"""
