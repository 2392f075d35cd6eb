"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up
    - Reports live entry and recycle record counts when the workspace is ready
"""

import logging
from fastapi import APIRouter, status

from catalog.services import catalog_workspace

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    body = {
        "status": "healthy",
        "service": "catalog-workspace-api",
        "version": "1.0.0",
    }
    workspace = catalog_workspace.workspace
    if workspace is not None:
        state = workspace.state
        body["entries"] = len(state.entries)
        body["recycled"] = state.recycle_bin.total
    return body
