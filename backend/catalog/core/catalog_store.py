"""Catalog Store — pure operations over the flat, ordered entry list.

Invariants:
    - Every operation takes a tuple of entries and returns a new tuple
    - Unknown ids are no-ops that return the input unchanged (never raise)
    - remove cascades ONE level (the entry and its direct children) unless
      recursive=True is requested
    - move never creates or destroys entries
    - restore never duplicates a live id

Design Decisions:
    - Flat tuple as the single source of truth: order encodes both render
      order and sibling adjacency; the tree is derived (catalog_tree.py)
    - update merges data one level deep with a name fallback, not a deep merge
    - add performs no uniqueness check; the workspace service guards it
"""

from dataclasses import replace
from typing import Any, Sequence

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.catalog_tree import descendant_ids
from catalog.core.classify import is_folder
from catalog.core.domain_types import DropPosition, EntryId
from catalog.core.ordering import is_ancestor, relocate_after

Entries = tuple[CatalogEntry, ...]


# --- Lookup -----------------------------------------------------------------

def index_of(entries: Sequence[CatalogEntry], entry_id: EntryId) -> int | None:
    for idx, entry in enumerate(entries):
        if entry.id == entry_id:
            return idx
    return None


def find_entry(
    entries: Sequence[CatalogEntry], entry_id: EntryId,
) -> CatalogEntry | None:
    idx = index_of(entries, entry_id)
    return entries[idx] if idx is not None else None


# --- Structural mutation ----------------------------------------------------

def add_entry(entries: Sequence[CatalogEntry], entry: CatalogEntry) -> Entries:
    """Append entry at the end of the list."""
    return (*entries, entry)


def partition_removal(
    entries: Sequence[CatalogEntry], entry_id: EntryId, recursive: bool = False,
) -> tuple[Entries, Entries]:
    """Split entries into (kept, removed) for a removal of entry_id.

    Removed entries keep their list order so recycle routing is deterministic.
    """
    if recursive:
        doomed = descendant_ids(entries, entry_id) | {entry_id}
    else:
        doomed = {
            e.id for e in entries if e.id == entry_id or e.parent_id == entry_id
        }
    if not doomed & {e.id for e in entries}:
        return tuple(entries), ()
    kept = tuple(e for e in entries if e.id not in doomed)
    removed = tuple(e for e in entries if e.id in doomed)
    return kept, removed


def remove_entry(
    entries: Sequence[CatalogEntry], entry_id: EntryId, recursive: bool = False,
) -> Entries:
    kept, _ = partition_removal(entries, entry_id, recursive)
    return kept


def _merge_entry(entry: CatalogEntry, fields: dict[str, Any]) -> CatalogEntry:
    name = fields.get("name") or entry.name
    data = {**entry.data, **(fields.get("data") or {}), "name": name}
    overrides = {
        k: v for k, v in fields.items()
        if k in ("type", "parent_id")
    }
    return replace(entry, **overrides, name=name, data=data)


def update_entry(
    entries: Sequence[CatalogEntry], entry_id: EntryId, fields: dict[str, Any],
) -> Entries:
    """Merge fields into the matching entry. The id itself cannot change."""
    idx = index_of(entries, entry_id)
    if idx is None:
        return tuple(entries)
    updated = list(entries)
    updated[idx] = _merge_entry(entries[idx], fields)
    return tuple(updated)


def restore_entry(
    entries: Sequence[CatalogEntry], snapshot: CatalogEntry,
) -> Entries:
    """Re-append a recycled entry unless its id is already live."""
    if index_of(entries, snapshot.id) is not None:
        return tuple(entries)
    return add_entry(entries, snapshot)


# --- Drag and drop ----------------------------------------------------------

def _target_parent(
    drop: CatalogEntry, position: DropPosition,
) -> tuple[bool, EntryId | None]:
    """(allowed, new parent_id) for a drop, per position and target kind."""
    if position == DropPosition.ONTO and is_folder(drop.type):
        return True, drop.id
    if position == DropPosition.AFTER:
        return True, drop.parent_id
    return False, None


def move_entry(
    entries: Sequence[CatalogEntry],
    drag_id: EntryId,
    drop_id: EntryId,
    position: DropPosition,
) -> Entries:
    """Reparent and relocate drag_id relative to drop_id.

    onto a folder: becomes its child; after any entry: becomes its sibling.
    Either way the dragged entry lands immediately after the drop target.

    No-ops: drag == drop, unknown ids, "before", "onto" a non-folder, and one
    extra condition beyond those: a target parent inside the dragged entry's
    own subtree (a folder dropped onto or after its descendant). That move
    would make the folder its own ancestor, so the catalog is returned as is.
    """
    if drag_id == drop_id:
        return tuple(entries)
    drag_idx = index_of(entries, drag_id)
    drop_idx = index_of(entries, drop_id)
    if drag_idx is None or drop_idx is None:
        return tuple(entries)

    drag, drop = entries[drag_idx], entries[drop_idx]
    allowed, parent_id = _target_parent(drop, position)
    if not allowed:
        return tuple(entries)
    # A folder cannot be moved inside its own subtree
    if parent_id is not None and is_ancestor(entries, drag.id, parent_id):
        return tuple(entries)

    reparented = list(entries)
    if drag.parent_id != parent_id:
        reparented[drag_idx] = replace(drag, parent_id=parent_id)
    return relocate_after(reparented, drag_idx, drop_idx)
