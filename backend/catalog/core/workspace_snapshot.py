"""Workspace Snapshot — serialization / deserialization for WorkspaceState.

Invariants:
    - to_snapshot produces a JSON-safe dict (no Enums, no tuples)
    - from_snapshot reconstructs a WorkspaceState from any valid snapshot dict
    - Missing keys fall back to defaults (empty catalog, empty categories)
    - Unknown recycle categories are ignored
    - Malformed entries raise KeyError / ValueError (mapped by the caller)
"""

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.domain_types import EntryId, EntryKind, RecordId, RecycleCategory
from catalog.core.recycle_store import RecycleBin, RecycleRecord
from catalog.core.workspace_state import WorkspaceState


def entry_to_dict(entry: CatalogEntry) -> dict:
    return {
        "id": entry.id,
        "parent_id": entry.parent_id,
        "type": entry.type.value,
        "name": entry.name,
        "data": dict(entry.data),
    }


def entry_from_dict(raw: dict) -> CatalogEntry:
    parent_id = raw.get("parent_id")
    return CatalogEntry(
        id=EntryId(str(raw["id"])),
        type=EntryKind(raw["type"]),
        name=raw.get("name", ""),
        parent_id=EntryId(str(parent_id)) if parent_id is not None else None,
        data=dict(raw.get("data") or {}),
    )


def record_to_dict(record: RecycleRecord) -> dict:
    return {
        "id": record.id,
        "expired_at": record.expired_at,
        "creator": record.creator,
        "deleted_item": entry_to_dict(record.deleted_item),
    }


def record_from_dict(raw: dict) -> RecycleRecord:
    return RecycleRecord(
        id=RecordId(str(raw["id"])),
        expired_at=raw.get("expired_at", ""),
        creator=raw.get("creator", ""),
        deleted_item=entry_from_dict(raw["deleted_item"]),
    )


def recycle_bin_to_dict(recycle_bin: RecycleBin) -> dict:
    return {
        category.value: [record_to_dict(r) for r in recycle_bin.records(category)]
        for category in RecycleCategory
    }


def recycle_bin_from_dict(raw: dict) -> RecycleBin:
    known = {c.value: c for c in RecycleCategory}
    buckets = {category: () for category in RecycleCategory}
    for key, records in (raw or {}).items():
        category = known.get(key)
        if category is None:
            continue
        buckets[category] = tuple(record_from_dict(r) for r in records or [])
    return RecycleBin(buckets=buckets)


def workspace_to_snapshot(state: WorkspaceState) -> dict:
    """Serialize WorkspaceState to a JSON-safe dict. Pure, no IO."""
    return {
        "entries": [entry_to_dict(e) for e in state.entries],
        "recycle_bin": recycle_bin_to_dict(state.recycle_bin),
    }


def workspace_from_snapshot(snapshot: dict) -> WorkspaceState:
    """Deserialize a snapshot dict into a WorkspaceState. Pure, no IO."""
    return WorkspaceState(
        entries=tuple(entry_from_dict(e) for e in snapshot.get("entries") or []),
        recycle_bin=recycle_bin_from_dict(snapshot.get("recycle_bin") or {}),
    )
