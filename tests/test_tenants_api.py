# tests/test_tenants_api.py
from datetime import datetime, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from tenant_registry.main import build_tenant_store, create_app
from tenant_registry.settings import Settings
from tenant_registry.tenants import (
    InMemoryTenantStore,
    SQLiteTenantStore,
    TenantInDB,
    TenantStoreUnavailableError,
)


class UnavailableTenantStore(InMemoryTenantStore):
    async def list_all(self) -> List[TenantInDB]:
        raise TenantStoreUnavailableError("list_all", "disk I/O error")


def test_create_then_get_then_missing(api_client):
    create_resp = api_client.post("/api/tenants", json={"name": "Acme", "domain": "acme.com"})
    assert create_resp.status_code == 201
    body = create_resp.json()
    assert set(body) == {"id", "name", "domain", "createdAt"}
    assert body["id"] == 1
    assert body["name"] == "Acme"
    assert body["domain"] == "acme.com"
    assert body["createdAt"]

    get_resp = api_client.get("/api/tenants/1")
    assert get_resp.status_code == 200
    assert get_resp.json() == body

    missing_resp = api_client.get("/api/tenants/999")
    assert missing_resp.status_code == 404
    assert missing_resp.json()["error"] == "tenant_not_found"


def test_created_at_carries_timezone(api_client):
    body = api_client.post("/api/tenants", json={"name": "Acme"}).json()
    created_at = body["createdAt"]
    assert created_at.endswith("Z") or created_at[-6] in "+-"


def test_empty_name_is_rejected_and_not_persisted(api_client):
    resp = api_client.post("/api/tenants", json={"name": ""})
    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"

    list_resp = api_client.get("/api/tenants")
    assert list_resp.status_code == 200
    assert list_resp.json() == []


@pytest.mark.parametrize(
    "payload",
    [{}, {"name": None}, {"name": "   "}, {"name": 42}, {"name": "Acme", "domain": 7}, [], "Acme"],
)
def test_malformed_create_bodies_return_400(api_client, payload):
    resp = api_client.post("/api/tenants", json=payload)
    assert resp.status_code == 400
    assert api_client.get("/api/tenants").json() == []


def test_invalid_json_returns_400(api_client):
    resp = api_client.post(
        "/api/tenants", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json()["details"] == ["body: invalid JSON"]


def test_domain_is_optional(api_client):
    resp = api_client.post("/api/tenants", json={"name": "Globex", "domain": None})
    assert resp.status_code == 201
    assert resp.json()["domain"] is None


def test_list_returns_all_created(api_client):
    for name in ("T1", "T2", "T3"):
        assert api_client.post("/api/tenants", json={"name": name}).status_code == 201

    resp = api_client.get("/api/tenants")
    assert resp.status_code == 200
    assert {t["name"] for t in resp.json()} == {"T1", "T2", "T3"}


def test_non_integer_id_returns_400(api_client):
    resp = api_client.get("/api/tenants/abc")
    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"


def test_storage_failure_returns_500():
    app = create_app(tenant_store=UnavailableTenantStore())
    with TestClient(app) as client:
        resp = client.get("/api/tenants")
    assert resp.status_code == 500
    assert resp.json()["error"] == "storage_unavailable"


def test_build_tenant_store_from_settings(tmp_path):
    sqlite_settings = Settings(storage_backend="sqlite", sqlite_db_path=str(tmp_path / "x.sqlite3"))
    assert isinstance(build_tenant_store(sqlite_settings), SQLiteTenantStore)
    assert isinstance(build_tenant_store(Settings(storage_backend="memory")), InMemoryTenantStore)
    with pytest.raises(ValueError, match="Unsupported storage_backend"):
        build_tenant_store(Settings(storage_backend="redis"))


def test_created_at_not_before_request_start(api_client):
    started_at = datetime.now(timezone.utc)
    body = api_client.post("/api/tenants", json={"name": "Acme"}).json()

    created_at = datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))
    assert created_at.tzinfo is not None
    assert created_at >= started_at


@pytest.mark.parametrize("tenant_id", ["0", "-1", "99999999999999999999", "-99999999999999999999"])
def test_ids_that_can_never_exist_return_404(api_client, tenant_id):
    api_client.post("/api/tenants", json={"name": "Acme"})

    resp = api_client.get(f"/api/tenants/{tenant_id}")

    assert resp.status_code == 404
    assert resp.json()["error"] == "tenant_not_found"


@pytest.mark.parametrize("tenant_id", ["1_0", "+1", "1.0", "0x1", "１"])
def test_alternate_id_spellings_return_400(api_client, tenant_id):
    for i in range(10):
        api_client.post("/api/tenants", json={"name": f"Tenant {i}"})

    resp = api_client.get(f"/api/tenants/{tenant_id}")

    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"
