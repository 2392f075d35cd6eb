"""Catalog Entries — add, update, remove, move and read the live catalog.

Invariants:
    - Unknown ids on update/remove/move are no-ops returning the current state
    - POST with an id that is already live returns 409 (DuplicateEntryError)
    - DELETE routes eligible removed entries into the recycle bin atomically

Design Decisions:
    - Mutating routes return the whole workspace: the UI re-renders from it
"""

from fastapi import APIRouter, Depends, Query, status

from catalog.core.catalog_tree import build_tree
from catalog.core.domain_types import EntryId
from catalog.schemas.catalog import (
    EntryCreate, EntryResponse, EntryUpdate, MoveRequest,
    RemovalResponse, TreeNodeResponse, WorkspaceResponse,
)
from catalog.services.catalog_workspace import CatalogWorkspace, get_workspace

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/entries", response_model=list[EntryResponse])
async def list_entries(workspace: CatalogWorkspace = Depends(get_workspace)):
    """Flat entry list in render order."""
    return [EntryResponse.from_entry(e) for e in workspace.state.entries]


@router.get("/tree", response_model=list[TreeNodeResponse])
async def get_tree(workspace: CatalogWorkspace = Depends(get_workspace)):
    """Folder hierarchy rebuilt from the flat list. Orphans appear as roots."""
    return [TreeNodeResponse.from_node(n) for n in build_tree(workspace.state.entries)]


@router.post(
    "/entries", response_model=EntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_entry(
    body: EntryCreate, workspace: CatalogWorkspace = Depends(get_workspace),
):
    entry = body.to_entry()
    workspace.add(entry)
    return EntryResponse.from_entry(entry)


@router.patch("/entries/{entry_id}", response_model=WorkspaceResponse)
async def update_entry(
    entry_id: str,
    body: EntryUpdate,
    workspace: CatalogWorkspace = Depends(get_workspace),
):
    state = workspace.update(EntryId(entry_id), body.to_fields())
    return WorkspaceResponse.from_state(state)


@router.delete("/entries/{entry_id}", response_model=RemovalResponse)
async def remove_entry(
    entry_id: str,
    recursive: bool = Query(False, description="Also remove grandchildren and deeper"),
    workspace: CatalogWorkspace = Depends(get_workspace),
):
    """Remove an entry and its direct children; recycle the eligible ones."""
    state, removed = workspace.remove(EntryId(entry_id), recursive=recursive)
    base = WorkspaceResponse.from_state(state)
    return RemovalResponse(
        entries=base.entries, recycle_bin=base.recycle_bin,
        removed_ids=[e.id for e in removed],
    )


@router.post("/move", response_model=WorkspaceResponse)
async def move_entry(
    body: MoveRequest, workspace: CatalogWorkspace = Depends(get_workspace),
):
    state = workspace.move(
        EntryId(body.drag_id), EntryId(body.drop_id), body.drop_position,
    )
    return WorkspaceResponse.from_state(state)
