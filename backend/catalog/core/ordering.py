"""Ordering — positional helpers for drag-and-drop on the flat entry list.

Invariants:
    - Every helper returns a new tuple with the same elements (count preserved)
    - relocate_after indexes are computed against the list BEFORE removal
    - is_ancestor terminates on cyclic or dangling parent chains
"""

from typing import Sequence, TypeVar

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.domain_types import EntryId

T = TypeVar("T")


def move_item(seq: Sequence[T], from_index: int, to_index: int) -> tuple[T, ...]:
    """Remove the item at from_index, then insert it at to_index."""
    items = list(seq)
    item = items.pop(from_index)
    items.insert(to_index, item)
    return tuple(items)


def relocate_after(
    seq: Sequence[T], from_index: int, anchor_index: int,
) -> tuple[T, ...]:
    """Move the item at from_index so it immediately follows the anchor.

    Removing the item shifts everything after it left by one, so the
    insertion index drops by one when the item started before the anchor.
    """
    target = anchor_index + 1
    if from_index < target:
        target -= 1
    return move_item(seq, from_index, target)


def is_ancestor(
    entries: Sequence[CatalogEntry], ancestor_id: EntryId, entry_id: EntryId,
) -> bool:
    """Whether ancestor_id appears on entry_id's parent chain (or is entry_id)."""
    parents = {e.id: e.parent_id for e in entries}
    seen: set[EntryId] = set()
    current: EntryId | None = entry_id
    while current is not None and current not in seen:
        if current == ancestor_id:
            return True
        seen.add(current)
        current = parents.get(current)
    return False
