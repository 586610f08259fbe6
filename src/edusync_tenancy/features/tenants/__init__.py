"""Tenant (school) entities and read-only data access."""

from .entities import Tenant, TenantSiteSettings, TenantRepository
from .repositories import TenantDatabaseRepository

__all__ = [
    "Tenant",
    "TenantSiteSettings",
    "TenantRepository",
    "TenantDatabaseRepository",
]
