# tests/conftest.py
import logging
import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to sys.path for local imports
project_root_path = Path(__file__).parent.parent.resolve()
if str(project_root_path) not in sys.path:
    sys.path.insert(0, str(project_root_path))

from tenant_registry.main import create_app
from tenant_registry.tenants import InMemoryTenantStore, SQLiteTenantStore, TenantService

logging.basicConfig(
    level=os.getenv("TEST_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
)


@pytest.fixture(params=["memory", "sqlite"])
async def tenant_store(request, tmp_path):
    """Each store-level test runs against both backends."""
    if request.param == "memory":
        store = InMemoryTenantStore()
    else:
        store = SQLiteTenantStore(str(tmp_path / "tenants.sqlite3"))
    await store.initialize()
    yield store
    await store.teardown()


@pytest.fixture
async def tenant_service(tenant_store):
    return TenantService(tenant_store)


@pytest.fixture
def api_client(tmp_path):
    """TestClient over a SQLite-backed app; the context manager runs the lifespan."""
    app = create_app(tenant_store=SQLiteTenantStore(str(tmp_path / "api.sqlite3")))
    with TestClient(app) as client:
        yield client
