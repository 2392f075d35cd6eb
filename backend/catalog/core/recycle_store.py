"""Recycle Store — per-category lists of soft-deleted catalog entries.

Invariants:
    - Every RecycleCategory is always present in a RecycleBin (possibly empty)
    - Records are newest-first (enqueue prepends)
    - A deleted_item.id appears at most once per category (enqueue is idempotent)
    - deleted_item is a value snapshot, never a live reference
    - Unknown record ids are no-ops (dequeue returns None)

Design Decisions:
    - Frozen dataclasses + tuples: every mutation yields a new RecycleBin
    - Record ids and expiry labels are injected by the caller (core stays pure)
"""

from dataclasses import dataclass, field

from catalog.core.catalog_entry import CatalogEntry
from catalog.core.domain_types import RecordId, RecycleCategory


@dataclass(frozen=True)
class RecycleRecord:
    """A deleted entry waiting in the recycle bin."""
    id: RecordId
    expired_at: str
    creator: str
    deleted_item: CatalogEntry


def _empty_buckets() -> dict[RecycleCategory, tuple[RecycleRecord, ...]]:
    return {category: () for category in RecycleCategory}


@dataclass(frozen=True)
class RecycleBin:
    """Snapshot of all recycle categories."""
    buckets: dict[RecycleCategory, tuple[RecycleRecord, ...]] = field(
        default_factory=_empty_buckets,
    )

    @classmethod
    def empty(cls) -> "RecycleBin":
        return cls()

    def records(self, category: RecycleCategory) -> tuple[RecycleRecord, ...]:
        return self.buckets.get(category, ())

    @property
    def total(self) -> int:
        """Number of records across all categories."""
        return sum(len(records) for records in self.buckets.values())

    def _with(
        self, category: RecycleCategory, records: tuple[RecycleRecord, ...],
    ) -> "RecycleBin":
        return RecycleBin(buckets={**self.buckets, category: records})


def new_record(
    item: CatalogEntry, record_id: RecordId, creator: str, expired_at: str,
) -> RecycleRecord:
    return RecycleRecord(
        id=record_id, expired_at=expired_at, creator=creator, deleted_item=item,
    )


def find_record(
    recycle_bin: RecycleBin, category: RecycleCategory, record_id: RecordId,
) -> RecycleRecord | None:
    for record in recycle_bin.records(category):
        if record.id == record_id:
            return record
    return None


def contains_item(
    recycle_bin: RecycleBin, category: RecycleCategory, item_id: str,
) -> bool:
    """Whether a record for deleted entry item_id already sits in category."""
    return any(r.deleted_item.id == item_id for r in recycle_bin.records(category))


def enqueue(
    recycle_bin: RecycleBin, category: RecycleCategory, record: RecycleRecord,
) -> RecycleBin:
    """Prepend record unless its deleted item is already in the category."""
    if contains_item(recycle_bin, category, record.deleted_item.id):
        return recycle_bin
    return recycle_bin._with(category, (record, *recycle_bin.records(category)))


def dequeue(
    recycle_bin: RecycleBin, category: RecycleCategory, record_id: RecordId,
) -> tuple[RecycleBin, CatalogEntry | None]:
    """Remove a record; return the new bin and the entry it held."""
    record = find_record(recycle_bin, category, record_id)
    if record is None:
        return recycle_bin, None
    remaining = tuple(r for r in recycle_bin.records(category) if r.id != record_id)
    return recycle_bin._with(category, remaining), record.deleted_item
