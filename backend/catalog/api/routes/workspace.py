"""Workspace — read-only view of both stores for the rendering client."""

from fastapi import APIRouter, Depends

from catalog.schemas.catalog import WorkspaceResponse
from catalog.services.catalog_workspace import CatalogWorkspace, get_workspace

router = APIRouter(prefix="/api/v1/workspace", tags=["workspace"])


@router.get("", response_model=WorkspaceResponse)
async def get_workspace_state(workspace: CatalogWorkspace = Depends(get_workspace)):
    """Current catalog and recycle bin, taken from one snapshot."""
    return WorkspaceResponse.from_state(workspace.state)
