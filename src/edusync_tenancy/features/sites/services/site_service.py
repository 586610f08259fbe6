"""Site context for rewritten tenant requests.

Looks a tenant up by the literal hostname carried in the rewritten path and
merges its public settings over platform defaults. A missing tenant or a
failed lookup yields the defaults so the page still renders.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ...tenants.entities import TenantRepository, TenantSiteSettings
from ..models.responses import BrandingSettings, ContactInfo, SiteContext


logger = logging.getLogger(__name__)


DEFAULT_SCHOOL_NAME = "EduSync Platform"
DEFAULT_SCHOOL_SLOGAN = "A tradition of excellence, a future of innovation."
DEFAULT_ADDRESS = "123 Education Lane, Accra, Ghana"
DEFAULT_EMAIL = "info@edusync.com"
DEFAULT_PHONE = "+233 12 345 6789"


def default_branding() -> BrandingSettings:
    return BrandingSettings(
        school_name=DEFAULT_SCHOOL_NAME,
        school_slogan=DEFAULT_SCHOOL_SLOGAN,
        homepage_hero_slides=[],
        current_academic_year=str(datetime.now(timezone.utc).year),
    )


def default_contact_info() -> ContactInfo:
    return ContactInfo(address=DEFAULT_ADDRESS, email=DEFAULT_EMAIL, phone=DEFAULT_PHONE)


class TenantSiteService:
    """Build the page context for a tenant domain."""

    def __init__(self, tenant_repository: TenantRepository):
        self._tenants = tenant_repository

    async def get_site_context(self, domain: str, page: str = "") -> SiteContext:
        """Return branding and contact info for domain, never raising."""
        try:
            tenant = await self._tenants.find_by_domain(domain)
            if tenant is None:
                logger.warning(f"No school found for domain '{domain}', serving defaults")
                return self._defaults(domain, page)

            settings = await self._tenants.find_site_settings(tenant.id)
        except Exception as e:
            logger.error(f"Failed to load site data for domain '{domain}': {e}")
            return self._defaults(domain, page)

        return SiteContext(
            domain=domain,
            page=page,
            tenant_id=str(tenant.id),
            is_default=False,
            branding=self._branding(settings),
            contact_info=self._contact_info(settings),
        )

    def _defaults(self, domain: str, page: str) -> SiteContext:
        return SiteContext(
            domain=domain,
            page=page,
            branding=default_branding(),
            contact_info=default_contact_info(),
        )

    @staticmethod
    def _branding(settings: Optional[TenantSiteSettings]) -> BrandingSettings:
        defaults = default_branding()
        if settings is None:
            return defaults
        return BrandingSettings(
            school_name=settings.school_name or defaults.school_name,
            school_slogan=settings.school_slogan or defaults.school_slogan,
            homepage_hero_slides=settings.homepage_hero_slides or [],
            current_academic_year=settings.current_academic_year or defaults.current_academic_year,
        )

    @staticmethod
    def _contact_info(settings: Optional[TenantSiteSettings]) -> ContactInfo:
        defaults = default_contact_info()
        if settings is None:
            return defaults
        return ContactInfo(
            address=settings.school_address or defaults.address,
            email=settings.school_email or defaults.email,
            phone=settings.school_phone or defaults.phone,
        )
