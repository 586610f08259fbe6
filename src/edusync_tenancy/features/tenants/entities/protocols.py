"""Protocol interfaces for tenant lookups."""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable

from ....core.value_objects import TenantId
from .tenant import Tenant, TenantSiteSettings


@runtime_checkable
class TenantRepository(Protocol):
    """Protocol for read-only tenant data access."""

    @abstractmethod
    async def find_by_id(self, tenant_id: TenantId) -> Optional[Tenant]:
        """Find tenant by primary key."""
        ...

    @abstractmethod
    async def find_by_domain(self, domain: str) -> Optional[Tenant]:
        """Find tenant by custom domain."""
        ...

    @abstractmethod
    async def find_site_settings(self, tenant_id: TenantId) -> Optional[TenantSiteSettings]:
        """Find public site settings for a tenant."""
        ...
