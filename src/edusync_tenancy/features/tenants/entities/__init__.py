from .tenant import Tenant, TenantSiteSettings
from .protocols import TenantRepository

__all__ = ["Tenant", "TenantSiteSettings", "TenantRepository"]
