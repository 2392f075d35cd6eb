"""API test fixtures — in-memory workspace + FastAPI test client.

Invariants:
    - Every test gets a fresh CatalogWorkspace with deterministic record ids
    - The module singleton is swapped in and restored after the test

Design Decisions:
    - ASGITransport does not run the lifespan, so the fixture initializes the
      workspace itself
"""

from itertools import count

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.services import catalog_workspace
from catalog.services.catalog_workspace import CatalogWorkspace
from catalog.main import app


@pytest.fixture
def workspace(monkeypatch):
    counter = count(1)
    ws = CatalogWorkspace(creator="tester", id_factory=lambda: f"rec{next(counter)}")
    monkeypatch.setattr(catalog_workspace, "workspace", ws)
    return ws


@pytest.fixture
async def client(workspace):
    """FastAPI test client bound to the fixture workspace."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
