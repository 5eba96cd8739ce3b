"""Pydantic Schemas — request/response shapes the HTTP shell exchanges with the core.

Invariants:
    - Schemas validate SHAPE only (types, positive ids, enum values)
    - Content rules (normalization, markup, placeholders, bounds) run in core value types
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core: schemas are API contracts, entities are the domain (ADR: DDD boundary)
    - to_*/apply_to raise core InvalidInputError, not pydantic ValidationError: the reason string
      reaches the caller verbatim
"""
