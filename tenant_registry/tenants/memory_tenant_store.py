# tenant_registry/tenants/memory_tenant_store.py
import logging
import threading
from typing import Dict, List, Optional
from datetime import datetime, timezone

from .storage_interfaces import AbstractTenantStore
from .models import TenantInDB

logger = logging.getLogger(__name__)


class InMemoryTenantStore(AbstractTenantStore):
    """Process-local tenant store. Records are lost when the process exits."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tenants: Dict[int, TenantInDB] = {}
        self._last_id = 0

    async def initialize(self) -> None:
        logger.info("InMemoryTenantStore initialized.")

    async def teardown(self) -> None:
        logger.info(f"InMemoryTenantStore teardown, discarding {len(self._tenants)} tenant(s).")

    async def insert(self, name: str, domain: Optional[str]) -> TenantInDB:
        with self._lock:
            self._last_id += 1
            record = TenantInDB(
                id=self._last_id,
                name=name,
                domain=domain,
                created_at=datetime.now(timezone.utc),
            )
            self._tenants[record.id] = record
            return record

    async def find_by_id(self, tenant_id: int) -> Optional[TenantInDB]:
        with self._lock:
            return self._tenants.get(tenant_id)

    async def list_all(self) -> List[TenantInDB]:
        with self._lock:
            # dicts keep insertion order, which is also ascending id order
            return list(self._tenants.values())
