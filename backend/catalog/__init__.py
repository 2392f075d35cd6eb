"""Catalog Workspace Package — hierarchical API catalog with recycle bin.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
