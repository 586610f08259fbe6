"""Pytest configuration and fixtures for edusync-tenancy tests."""

import pytest
from unittest.mock import AsyncMock

from edusync_tenancy.config.provider import ConfigKey, StaticConfigurationProvider
from edusync_tenancy.core.value_objects import TenantId
from edusync_tenancy.features.tenants.entities import Tenant, TenantSiteSettings


ENV_DEFAULTS = {
    ConfigKey.MARKETING_DOMAIN: "sjm.com",
    ConfigKey.EMAIL_API_KEY: "env_resend",
    ConfigKey.SMS_API_KEY: "env_arkesel_key",
    ConfigKey.SMS_SENDER_ID: "env_arkesel_sender",
    ConfigKey.CONTACT_EMAIL: "env_contact@sjm.com",
    ConfigKey.FROM_EMAIL: "env_from@sjm.com",
}


@pytest.fixture
def config_provider():
    """Configuration provider with every default set."""
    return StaticConfigurationProvider(ENV_DEFAULTS)


@pytest.fixture
def empty_config_provider():
    """Configuration provider with nothing configured."""
    return StaticConfigurationProvider({})


@pytest.fixture
def sample_tenant_id():
    return TenantId(42)


@pytest.fixture
def sample_tenant(sample_tenant_id):
    """Tenant with every credential set."""
    return Tenant(
        id=sample_tenant_id,
        name="St. John Mission School",
        domain="portal.sjm.com",
        email_provider_api_key="tenant_resend",
        sms_provider_api_key="tenant_arkesel_key",
        sms_sender_id="SJM",
        contact_email="office@portal.sjm.com",
        from_email="noreply@portal.sjm.com",
    )


@pytest.fixture
def sample_site_settings(sample_tenant_id):
    return TenantSiteSettings(
        tenant_id=sample_tenant_id,
        school_name="St. John Mission School",
        school_slogan="Knowledge and service",
        homepage_hero_slides=[{"id": "1", "url": "https://cdn.sjm.com/hero.jpg", "slogan": "Welcome"}],
        current_academic_year="2025/2026",
        school_address="P.O. Box 12, Kumasi",
        school_email="office@portal.sjm.com",
        school_phone="+233 24 000 0000",
    )


@pytest.fixture
def mock_tenant_repository():
    """Mock tenant repository; no rows unless a test sets return values."""
    repo = AsyncMock()
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_domain = AsyncMock(return_value=None)
    repo.find_site_settings = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_database():
    """Mock database manager for repository tests."""
    db = AsyncMock()
    db.fetchrow = AsyncMock(return_value=None)
    return db
