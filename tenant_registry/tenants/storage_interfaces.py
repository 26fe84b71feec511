# tenant_registry/tenants/storage_interfaces.py
from abc import ABC, abstractmethod
from typing import Optional, List
from .models import TenantInDB


class AbstractTenantStore(ABC):
    """
    Abstract base class defining the interface for tenant storage operations.

    Implementations own id assignment: every inserted record receives a
    fresh, unique, positive id even when inserts arrive concurrently.
    Storage failures are reported as TenantStoreUnavailableError.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend and prepare it for operations."""
        pass

    @abstractmethod
    async def teardown(self) -> None:
        """Clean up resources and properly close the storage backend."""
        pass

    @abstractmethod
    async def insert(self, name: str, domain: Optional[str]) -> TenantInDB:
        """
        Persist a new tenant.

        Args:
            name: Non-empty display name
            domain: Optional domain, stored as given

        Returns:
            The stored record with its assigned id and creation timestamp
        """
        pass

    @abstractmethod
    async def find_by_id(self, tenant_id: int) -> Optional[TenantInDB]:
        """
        Retrieve a tenant by its numeric identifier.

        Returns:
            The tenant if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[TenantInDB]:
        """Retrieve every stored tenant in natural storage order."""
        pass
