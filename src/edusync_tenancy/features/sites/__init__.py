"""Tenant public sites served behind the rewrite middleware."""

from .models import BrandingSettings, ContactInfo, SiteContext
from .services import TenantSiteService

__all__ = ["BrandingSettings", "ContactInfo", "SiteContext", "TenantSiteService"]
