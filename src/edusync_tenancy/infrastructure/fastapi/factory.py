"""FastAPI application factory.

Wires the tenant rewrite middleware, the tenant site router and the
data-store lifecycle into one application.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ...__version__ import __version__
from ...config.provider import ConfigKey, ConfigurationProvider, EnvironmentConfigurationProvider
from ...config.settings import TenancySettings, get_settings
from ...core.exceptions import EduSyncError, create_error_response
from ...database import DatabaseManager
from ...features.credentials.services import CredentialResolver
from ...features.notifications.services import ArkeselSmsService, ResendEmailService
from ...features.routing.services import TenantResolver
from ...features.sites.routers import router as site_router
from ...features.sites.services import TenantSiteService
from ...features.tenants.entities import TenantRepository
from ...features.tenants.repositories import TenantDatabaseRepository
from ..middleware import TenantRewriteMiddleware

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[TenancySettings] = None,
    tenant_repository: Optional[TenantRepository] = None,
    config_provider: Optional[ConfigurationProvider] = None,
) -> FastAPI:
    """Create the tenancy application.

    Args:
        settings: Application settings (environment by default)
        tenant_repository: Tenant data access (asyncpg-backed by default)
        config_provider: Configuration provider (settings-backed by default)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    config_provider = config_provider or EnvironmentConfigurationProvider(settings)

    database: Optional[DatabaseManager] = None
    if tenant_repository is None:
        database = DatabaseManager.from_settings(settings)
        tenant_repository = TenantDatabaseRepository(database)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} tenancy service ({settings.environment})")
        if not config_provider.get(ConfigKey.MARKETING_DOMAIN):
            logger.error("SITE_URL is not set; all requests will pass through without tenant rewriting")
        yield
        if database is not None:
            await database.close_pool()

    app = FastAPI(title=f"{settings.app_name} Tenancy", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.tenant_repository = tenant_repository
    credential_resolver = CredentialResolver(tenant_repository, config_provider)
    app.state.credential_resolver = credential_resolver
    app.state.sms_service = ArkeselSmsService(credential_resolver, api_timeout=settings.api_request_timeout_seconds)
    app.state.email_service = ResendEmailService(credential_resolver, api_timeout=settings.api_request_timeout_seconds)
    app.state.site_service = TenantSiteService(tenant_repository)

    app.add_middleware(TenantRewriteMiddleware, resolver=TenantResolver(config_provider))

    @app.exception_handler(EduSyncError)
    async def edusync_error_handler(request: Request, exc: EduSyncError) -> JSONResponse:
        logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=500, content=create_error_response(exc))

    @app.get("/health", tags=["System"])
    async def health():
        health_status = {"status": "ok", "version": __version__}
        if database is not None:
            health_status["database"] = "ok" if await database.health_check() else "unavailable"
        return health_status

    app.include_router(site_router)

    logger.info("Created tenancy application")
    return app
