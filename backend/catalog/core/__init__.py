"""Core Layer — pure domain logic, no IO, no async, no global state.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic (randomness is injected)
    - Every mutation returns a new snapshot; inputs are never modified

Design Decisions:
    - Functional core separated from imperative shell
"""
