"""Single route handler serving every tenant site.

Requests reach these routes after the tenant middleware rewrites
``/about`` on ``portal.school.com`` to ``/portal.school.com/about``.
"""

from fastapi import APIRouter, Depends, Request

from ..models.responses import SiteContext
from ..services.site_service import TenantSiteService


router = APIRouter(tags=["Tenant Sites"])


def get_site_service(request: Request) -> TenantSiteService:
    """Site service stored on application state by the app factory."""
    return request.app.state.site_service


@router.get("/{domain}", response_model=SiteContext)
async def tenant_home(domain: str, service: TenantSiteService = Depends(get_site_service)) -> SiteContext:
    return await service.get_site_context(domain)


@router.get("/{domain}/{page:path}", response_model=SiteContext)
async def tenant_page(
    domain: str,
    page: str,
    service: TenantSiteService = Depends(get_site_service),
) -> SiteContext:
    return await service.get_site_context(domain, page)
