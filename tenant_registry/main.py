# tenant_registry/main.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from typing import Optional

from .settings import Settings, settings as default_settings, SUPPORTED_STORAGE_BACKENDS
from .tenants.endpoints import tenants_router
from .tenants.errors import InfrastructureError, status_code_for
from .tenants.memory_tenant_store import InMemoryTenantStore
from .tenants.service import TenantService
from .tenants.sqlite_tenant_store import SQLiteTenantStore
from .tenants.storage_interfaces import AbstractTenantStore

if not logging.getLogger().hasHandlers():
    logging.basicConfig(
        level="DEBUG" if default_settings.debug_mode else default_settings.log_level.upper(),
        format='%(asctime)s - %(name)s [%(levelname)s] - %(message)s'
    )

logger = logging.getLogger(__name__)


def build_tenant_store(app_settings: Settings) -> AbstractTenantStore:
    """Construct the tenant store selected by the storage_backend setting."""
    backend = app_settings.storage_backend.lower()
    if backend == "sqlite":
        logger.info(f"SQLite backend selected (path: {app_settings.sqlite_db_path}).")
        return SQLiteTenantStore(app_settings.sqlite_db_path)
    if backend == "memory":
        logger.warning("In-memory backend selected. Tenants will not survive a restart.")
        return InMemoryTenantStore()
    raise ValueError(
        f"Unsupported storage_backend: {app_settings.storage_backend} "
        f"(expected one of {', '.join(SUPPORTED_STORAGE_BACKENDS)})"
    )


async def infrastructure_error_handler(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(
        f"API: Infrastructure failure while handling {request.method} {request.url.path}: {exc}",
        exc_info=exc
    )
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": "storage_unavailable", "message": "Tenant storage is unavailable."}
    )


def create_app(
    tenant_store: Optional[AbstractTenantStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application with explicitly constructed components.

    The store is built from settings unless one is passed in, wrapped in a
    TenantService, and exposed to request handlers through app.state.
    The lifespan opens the store on startup and closes it on shutdown.
    """
    app_settings = app_settings or default_settings
    store = tenant_store or build_tenant_store(app_settings)
    service = TenantService(store)

    @asynccontextmanager
    async def registry_app_lifespan(app_instance: FastAPI):
        logger.info("Application startup initiated.")
        await store.initialize()
        logger.info(f"Tenant store {type(store).__name__} initialized.")
        try:
            yield
        finally:
            logger.info("Application shutdown initiated.")
            await store.teardown()
            logger.info("All components torn down.")

    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.debug_mode,
        lifespan=registry_app_lifespan,
    )
    app.state.tenant_store = store
    app.state.tenant_service = service
    app.add_exception_handler(InfrastructureError, infrastructure_error_handler)
    app.include_router(tenants_router)
    return app


app = create_app()
