# tenant_registry/tenants/__init__.py
"""
Tenant management module initialization.

Data models, storage abstractions and their SQLite and in-memory
implementations, the service layer, and the HTTP router.
"""

from .models import TenantCreate, TenantInDB, TenantView
from .errors import (
    TenantError,
    TenantValidationError,
    TenantNotFound,
    InfrastructureError,
    TenantStoreUnavailableError,
    ERROR_STATUS_CODES,
    status_code_for,
)
from .storage_interfaces import AbstractTenantStore
from .sqlite_tenant_store import SQLiteTenantStore
from .memory_tenant_store import InMemoryTenantStore
from .service import TenantService
from .endpoints import tenants_router

__all__ = [
    # Data models
    "TenantCreate",
    "TenantInDB",
    "TenantView",
    # Error results, exceptions and status mapping
    "TenantError",
    "TenantValidationError",
    "TenantNotFound",
    "InfrastructureError",
    "TenantStoreUnavailableError",
    "ERROR_STATUS_CODES",
    "status_code_for",
    # Storage layer
    "AbstractTenantStore",
    "SQLiteTenantStore",
    "InMemoryTenantStore",
    # Business logic service
    "TenantService",
    # API endpoints
    "tenants_router",
]
