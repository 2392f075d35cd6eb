"""Catalog Entry — immutable value type for one node of the catalog.

Invariants:
    - id is globally unique across the live catalog
    - parent_id is None for roots; a dangling parent_id marks an orphan
    - Instances are never mutated; updates go through dataclasses.replace

Design Decisions:
    - Frozen dataclass over pydantic: core stays free of boundary validation
    - data is a plain dict payload, shallow-copied whenever an entry is rebuilt
"""

from dataclasses import dataclass, field
from typing import Any

from catalog.core.domain_types import EntryId, EntryKind


@dataclass(frozen=True)
class CatalogEntry:
    """One catalog node: a folder or a leaf item."""

    id: EntryId
    type: EntryKind
    name: str
    parent_id: EntryId | None = None
    data: dict[str, Any] = field(default_factory=dict)
