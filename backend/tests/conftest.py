"""Shared test fixtures: catalog snapshot, ASGI transport, test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from coursebuilder.config import DEFAULT_DATA_DIR
from coursebuilder.dependencies import get_catalog
from coursebuilder.main import app
from coursebuilder.services.catalog_loader import CatalogSnapshot, load_catalog


@pytest.fixture
def catalog() -> CatalogSnapshot:
    """The catalog snapshot shipped with the package."""
    return load_catalog(DEFAULT_DATA_DIR)


@pytest.fixture
def api_transport(catalog: CatalogSnapshot):
    """ASGI transport to the app, wired to the test catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield ASGITransport(app=app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_transport: ASGITransport) -> AsyncClient:
    """Yield an httpx AsyncClient wired to the test catalog."""
    async with AsyncClient(transport=api_transport, base_url="http://test") as c:
        yield c
