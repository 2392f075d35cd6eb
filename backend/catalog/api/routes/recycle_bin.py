"""Recycle Bin — list soft-deleted entries and restore them.

Invariants:
    - Restoring an unknown record is a no-op returning the current state
    - A restored entry is appended to the end of the catalog
    - Restoring never duplicates a live id
"""

from fastapi import APIRouter, Depends

from catalog.core.domain_types import RecordId, RecycleCategory
from catalog.schemas.catalog import (
    EntryResponse, RecycleBinResponse, RestoreResponse,
)
from catalog.services.catalog_workspace import CatalogWorkspace, get_workspace

router = APIRouter(prefix="/api/v1/recycle", tags=["recycle-bin"])


@router.get("", response_model=RecycleBinResponse)
async def get_recycle_bin(workspace: CatalogWorkspace = Depends(get_workspace)):
    return RecycleBinResponse.from_bin(workspace.state.recycle_bin)


@router.post("/{category}/{record_id}/restore", response_model=RestoreResponse)
async def restore_record(
    category: RecycleCategory,
    record_id: str,
    workspace: CatalogWorkspace = Depends(get_workspace),
):
    """Take a record out of the bin and put its entry back in the catalog."""
    state, item = workspace.restore(category, RecordId(record_id))
    return RestoreResponse(
        entries=[EntryResponse.from_entry(e) for e in state.entries],
        recycle_bin=RecycleBinResponse.from_bin(state.recycle_bin),
        restored=EntryResponse.from_entry(item) if item else None,
    )
