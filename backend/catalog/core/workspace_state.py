"""Workspace State — the catalog and the recycle bin committed as one snapshot.

Invariants:
    - Composite operations derive BOTH stores from the same input snapshot
    - An entry is never missing from the catalog without its recycle record
      (when eligible), and never present in both after a restore
    - Non-eligible removed entries (folders) are dropped permanently
    - Unknown ids leave the snapshot unchanged

Design Decisions:
    - One frozen dataclass holds both stores: a single assignment commits them
    - Record id generation is injected as a callable (core stays deterministic)
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable

from catalog.core import catalog_store, recycle_store
from catalog.core.catalog_entry import CatalogEntry
from catalog.core.classify import recycle_category_of
from catalog.core.domain_types import DropPosition, EntryId, RecordId, RecycleCategory
from catalog.core.recycle_store import RecycleBin


@dataclass(frozen=True)
class WorkspaceState:
    """Immutable snapshot of the live catalog and its recycle bin."""
    entries: tuple[CatalogEntry, ...] = ()
    recycle_bin: RecycleBin = field(default_factory=RecycleBin.empty)


def add_entry(state: WorkspaceState, entry: CatalogEntry) -> WorkspaceState:
    return replace(state, entries=catalog_store.add_entry(state.entries, entry))


def update_entry(
    state: WorkspaceState, entry_id: EntryId, fields: dict[str, Any],
) -> WorkspaceState:
    updated = catalog_store.update_entry(state.entries, entry_id, fields)
    if updated == state.entries:
        return state
    return replace(state, entries=updated)


def move_entry(
    state: WorkspaceState,
    drag_id: EntryId,
    drop_id: EntryId,
    position: DropPosition,
) -> WorkspaceState:
    moved = catalog_store.move_entry(state.entries, drag_id, drop_id, position)
    if moved == state.entries:
        return state
    return replace(state, entries=moved)


def remove_to_recycle(
    state: WorkspaceState,
    entry_id: EntryId,
    *,
    make_record_id: Callable[[], str],
    creator: str,
    expired_at: str,
    recursive: bool = False,
) -> tuple[WorkspaceState, tuple[CatalogEntry, ...]]:
    """Remove entry_id (and its children) and route them into the recycle bin.

    Returns the new snapshot and the removed entries in list order.
    """
    kept, removed = catalog_store.partition_removal(
        state.entries, entry_id, recursive,
    )
    if not removed:
        return state, ()

    recycle_bin = state.recycle_bin
    for item in removed:
        category = recycle_category_of(item.type)
        if category is None:
            continue
        record = recycle_store.new_record(
            item, RecordId(make_record_id()), creator, expired_at,
        )
        recycle_bin = recycle_store.enqueue(recycle_bin, category, record)
    return WorkspaceState(entries=kept, recycle_bin=recycle_bin), removed


def restore_from_recycle(
    state: WorkspaceState, category: RecycleCategory, record_id: RecordId,
) -> tuple[WorkspaceState, CatalogEntry | None]:
    """Take a record out of the bin and re-append its entry to the catalog.

    The record leaves the bin even when its id is already live; in that case
    the catalog is left as-is so the id stays unique.
    """
    recycle_bin, item = recycle_store.dequeue(state.recycle_bin, category, record_id)
    if item is None:
        return state, None
    entries = catalog_store.restore_entry(state.entries, item)
    return WorkspaceState(entries=entries, recycle_bin=recycle_bin), item
