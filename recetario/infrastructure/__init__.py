"""Infrastructure Layer — cross-cutting concerns the shell wires up at startup.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
