"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from schemas/ or infrastructure/
    - All functions are pure and deterministic; the only side effects are raised
      InvalidInputError and DEBUG log records

Design Decisions:
    - Functional core separated from imperative shell: persistence and HTTP live outside this package
"""
