"""Catalog Workspace — single-writer holder of the current WorkspaceState.

Invariants:
    - The current snapshot is replaced by ONE assignment per operation, under
      a lock: readers see either the old or the new snapshot, never a mix
    - Catalog and recycle bin are always committed together
    - add rejects ids that are already live (DuplicateEntryError)
    - Every other unknown-id request is a logged no-op

Design Decisions:
    - Shell around the pure core: computes with core functions, then commits
    - Module-level singleton initialized in the FastAPI lifespan (init_workspace)
    - id_factory injectable so tests get deterministic record ids
"""

import logging
import threading
from typing import Any, Callable

from catalog.core import workspace_state as ws
from catalog.core.catalog_entry import CatalogEntry
from catalog.core.catalog_store import find_entry
from catalog.core.domain_types import (
    DropPosition, EntryId, Locale, RecordId, RecycleCategory, RECYCLE_EXPIRY_LABELS,
)
from catalog.core.errors import DuplicateEntryError, ErrorContext
from catalog.core.workspace_state import WorkspaceState
from catalog.infrastructure.short_id import generate_short_id

logger = logging.getLogger(__name__)


class CatalogWorkspace:
    """Owns the live catalog and recycle bin for one process."""

    def __init__(
        self,
        initial_state: WorkspaceState | None = None,
        *,
        creator: str = "anonymous",
        expiry_label: str = RECYCLE_EXPIRY_LABELS[Locale.EN],
        id_factory: Callable[[], str] = generate_short_id,
    ):
        self._state = initial_state or WorkspaceState()
        self._lock = threading.Lock()
        self.creator = creator
        self.expiry_label = expiry_label
        self._id_factory = id_factory

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def load(self, state: WorkspaceState) -> None:
        """Replace the whole workspace (startup data from a loader)."""
        with self._lock:
            self._state = state
        logger.info(
            f"Workspace loaded with {len(state.entries)} entries",
            extra={"operation": "load"},
        )

    def add(self, entry: CatalogEntry) -> WorkspaceState:
        with self._lock:
            if find_entry(self._state.entries, entry.id) is not None:
                raise DuplicateEntryError(
                    entry.id, ErrorContext(operation="add"),
                )
            self._state = ws.add_entry(self._state, entry)
            state = self._state
        logger.info(
            f"Added {entry.type.value} '{entry.name}'",
            extra={"entry_id": entry.id, "operation": "add"},
        )
        return state

    def update(self, entry_id: EntryId, fields: dict[str, Any]) -> WorkspaceState:
        with self._lock:
            before = self._state
            self._state = ws.update_entry(before, entry_id, fields)
            state = self._state
        if state is before:
            logger.info(
                "Update left the catalog unchanged",
                extra={"entry_id": entry_id, "operation": "update"},
            )
        return state

    def remove(
        self, entry_id: EntryId, recursive: bool = False,
    ) -> tuple[WorkspaceState, tuple[CatalogEntry, ...]]:
        """Remove an entry and its children, recycling the eligible ones."""
        with self._lock:
            self._state, removed = ws.remove_to_recycle(
                self._state,
                entry_id,
                make_record_id=self._id_factory,
                creator=self.creator,
                expired_at=self.expiry_label,
                recursive=recursive,
            )
            state = self._state
        logger.info(
            f"Removed {len(removed)} entries",
            extra={
                "entry_id": entry_id, "operation": "remove",
                "removed_count": len(removed),
            },
        )
        return state, removed

    def move(
        self, drag_id: EntryId, drop_id: EntryId, position: DropPosition,
    ) -> WorkspaceState:
        with self._lock:
            before = self._state
            self._state = ws.move_entry(before, drag_id, drop_id, position)
            state = self._state
        if state is before:
            logger.debug(
                f"Move {drag_id} {position.value} {drop_id} was a no-op",
                extra={"entry_id": drag_id, "operation": "move"},
            )
        return state

    def restore(
        self, category: RecycleCategory, record_id: RecordId,
    ) -> tuple[WorkspaceState, CatalogEntry | None]:
        """Move a recycled entry back into the catalog."""
        with self._lock:
            self._state, item = ws.restore_from_recycle(
                self._state, category, record_id,
            )
            state = self._state
        logger.info(
            "Restored entry" if item else "Restore skipped: record not found",
            extra={
                "entry_id": item.id if item else None,
                "operation": "restore",
                "category": category.value,
                "record_id": record_id,
            },
        )
        return state, item


# Singleton (initialized on startup)
workspace: CatalogWorkspace | None = None


def init_workspace(state: WorkspaceState | None = None, **kwargs) -> CatalogWorkspace:
    global workspace
    workspace = CatalogWorkspace(state, **kwargs)
    return workspace


def get_workspace() -> CatalogWorkspace:
    """FastAPI dependency for the process workspace."""
    if not workspace:
        raise RuntimeError("Workspace not initialized")
    return workspace
