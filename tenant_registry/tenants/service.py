# tenant_registry/tenants/service.py
import logging
from typing import Optional, List, Union
from .models import TenantView
from .errors import TenantNotFound, TenantValidationError
from .storage_interfaces import AbstractTenantStore
from .validation import normalize_name, normalize_domain

logger = logging.getLogger(__name__)


class TenantService:
    """
    Service layer for tenant management operations.

    Sits between the API layer and the tenant store. Lookups and creation
    return explicit error results instead of raising; storage failures
    propagate unchanged as InfrastructureError.
    """

    def __init__(self, tenant_store: AbstractTenantStore):
        self.tenant_store = tenant_store

    async def list_tenants(self) -> List[TenantView]:
        logger.info("Service: Listing tenants")
        records = await self.tenant_store.list_all()
        return [TenantView.from_record(r) for r in records]

    async def get_tenant(self, tenant_id: int) -> Union[TenantView, TenantNotFound]:
        logger.info(f"Service: Getting tenant with id: {tenant_id}")
        record = await self.tenant_store.find_by_id(tenant_id)
        if record is None:
            logger.info(f"Service: Tenant with id {tenant_id} does not exist")
            return TenantNotFound(tenant_id=tenant_id)
        return TenantView.from_record(record)

    async def create_tenant(
        self, name: Optional[str], domain: Optional[str] = None
    ) -> Union[TenantView, TenantValidationError]:
        """
        Register a new tenant.

        The name is checked here even though the API validates it first,
        so that no caller can persist a tenant with a blank name.
        """
        checked_name = normalize_name(name)
        if isinstance(checked_name, TenantValidationError):
            logger.warning(f"Service: Rejected tenant creation: {checked_name.message}")
            return checked_name

        logger.info(f"Service: Creating tenant '{checked_name}'")
        record = await self.tenant_store.insert(checked_name, normalize_domain(domain))
        logger.info(f"Service: Created tenant with id: {record.id}")
        return TenantView.from_record(record)
