"""Tests for tenant site context."""

from datetime import datetime, timezone

import pytest

from edusync_tenancy.core.exceptions import DatabaseError
from edusync_tenancy.features.sites import TenantSiteService
from edusync_tenancy.features.sites.services.site_service import DEFAULT_SCHOOL_NAME, DEFAULT_PHONE


@pytest.fixture
def service(mock_tenant_repository):
    return TenantSiteService(mock_tenant_repository)


class TestGetSiteContext:

    @pytest.mark.asyncio
    async def test_known_domain_uses_tenant_settings(self, service, mock_tenant_repository, sample_tenant,
                                                     sample_site_settings):
        mock_tenant_repository.find_by_domain.return_value = sample_tenant
        mock_tenant_repository.find_site_settings.return_value = sample_site_settings

        context = await service.get_site_context("portal.sjm.com", "about")

        assert context.is_default is False
        assert context.tenant_id == "42"
        assert context.page == "about"
        assert context.branding.school_name == "St. John Mission School"
        assert context.branding.homepage_hero_slides[0]["slogan"] == "Welcome"
        assert context.contact_info.phone == "+233 24 000 0000"
        mock_tenant_repository.find_by_domain.assert_awaited_once_with("portal.sjm.com")

    @pytest.mark.asyncio
    async def test_missing_settings_fields_use_defaults(self, service, mock_tenant_repository, sample_tenant,
                                                        sample_site_settings):
        sample_site_settings.school_phone = None
        sample_site_settings.school_name = ""
        mock_tenant_repository.find_by_domain.return_value = sample_tenant
        mock_tenant_repository.find_site_settings.return_value = sample_site_settings

        context = await service.get_site_context("portal.sjm.com")

        assert context.is_default is False
        assert context.branding.school_name == DEFAULT_SCHOOL_NAME
        assert context.contact_info.phone == DEFAULT_PHONE

    @pytest.mark.asyncio
    async def test_tenant_without_settings_row(self, service, mock_tenant_repository, sample_tenant):
        mock_tenant_repository.find_by_domain.return_value = sample_tenant

        context = await service.get_site_context("portal.sjm.com")

        assert context.is_default is False
        assert context.branding.school_name == DEFAULT_SCHOOL_NAME

    @pytest.mark.asyncio
    async def test_unknown_domain_serves_defaults(self, service):
        context = await service.get_site_context("unknown.example.com")

        assert context.is_default is True
        assert context.tenant_id is None
        assert context.domain == "unknown.example.com"
        assert context.branding.current_academic_year == str(datetime.now(timezone.utc).year)

    @pytest.mark.asyncio
    async def test_lookup_failure_serves_defaults(self, service, mock_tenant_repository):
        mock_tenant_repository.find_by_domain.side_effect = DatabaseError("down")

        context = await service.get_site_context("portal.sjm.com")

        assert context.is_default is True
