# tests/test_tenant_service.py
from datetime import datetime, timezone

import pytest

from tenant_registry.tenants import TenantNotFound, TenantValidationError, TenantView


async def test_create_tenant_returns_view(tenant_service):
    started_at = datetime.now(timezone.utc)
    view = await tenant_service.create_tenant("Acme", "acme.com")

    assert isinstance(view, TenantView)
    assert view.id > 0
    assert view.name == "Acme"
    assert view.domain == "acme.com"
    assert view.created_at >= started_at


async def test_create_tenant_strips_name_and_blank_domain(tenant_service):
    view = await tenant_service.create_tenant("  Acme  ", "   ")
    assert view.name == "Acme"
    assert view.domain is None


@pytest.mark.parametrize("bad_name", [None, "", "   ", "\t\n"])
async def test_create_tenant_rejects_empty_name(tenant_service, bad_name):
    result = await tenant_service.create_tenant(bad_name, "acme.com")

    assert isinstance(result, TenantValidationError)
    assert result.code == "validation_error"
    assert await tenant_service.list_tenants() == []


async def test_get_tenant_unknown_id(tenant_service):
    result = await tenant_service.get_tenant(999)
    assert isinstance(result, TenantNotFound)
    assert result.tenant_id == 999
    assert result.message == "Tenant not found with id 999"


async def test_get_tenant_is_repeatable(tenant_service):
    created = await tenant_service.create_tenant("Umbrella", None)
    first = await tenant_service.get_tenant(created.id)
    second = await tenant_service.get_tenant(created.id)
    assert first == second == created


async def test_list_tenants_contains_exactly_created(tenant_service):
    created = [await tenant_service.create_tenant(name, None) for name in ("T1", "T2", "T3")]
    listed = await tenant_service.list_tenants()
    assert {v.id for v in listed} == {v.id for v in created}
    assert set(listed) == set(created)
