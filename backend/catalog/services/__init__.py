"""Services Layer — the imperative shell that owns live workspace state.

Invariants:
    - Services call core functions and commit the results; no domain rules here
"""
