"""Infrastructure Layer — IO and cross-cutting concerns around the core.

Invariants:
    - Infrastructure never holds domain rules (those live in core/)
    - Randomness and file access happen here, never in core/
"""
