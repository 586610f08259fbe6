from .site_service import TenantSiteService

__all__ = ["TenantSiteService"]
