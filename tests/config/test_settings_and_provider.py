"""Tests for settings, configuration providers and logging setup."""

import logging

import pytest

from edusync_tenancy.config import (
    ConfigKey,
    EnvironmentConfigurationProvider,
    StaticConfigurationProvider,
    TenancySettings,
)
from edusync_tenancy.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from edusync_tenancy.config.provider import get_config_provider, set_config_provider
from edusync_tenancy.config.settings import extract_hostname


class TestExtractHostname:

    @pytest.mark.parametrize("site_url,expected", [
        ("https://sjm.com", "sjm.com"),
        ("https://sjm.com/", "sjm.com"),
        ("http://sjm.com:3000/path", "sjm.com"),
        ("sjm.com", "sjm.com"),
        ("https://SJM.com", "sjm.com"),
    ])
    def test_hostname_is_extracted(self, site_url, expected):
        assert extract_hostname(site_url) == expected

    @pytest.mark.parametrize("site_url", [None, "", "   "])
    def test_blank_is_none(self, site_url):
        assert extract_hostname(site_url) is None


class TestTenancySettings:

    def test_reads_provider_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("RESEND_API_KEY", "env_resend")
        monkeypatch.setenv("ARKESEL_API_KEY", "env_arkesel_key")
        monkeypatch.setenv("ARKESEL_SENDER_ID", "env_arkesel_sender")
        monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "https://sjm.com")

        settings = TenancySettings(_env_file=None)

        assert settings.resend_api_key == "env_resend"
        assert settings.arkesel_api_key == "env_arkesel_key"
        assert settings.arkesel_sender_id == "env_arkesel_sender"
        assert settings.marketing_domain == "sjm.com"

    def test_site_url_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("SITE_URL", "https://edusync.com")
        monkeypatch.setenv("NEXT_PUBLIC_SITE_URL", "https://sjm.com")

        assert TenancySettings(_env_file=None).marketing_domain == "edusync.com"

    def test_unset_site_url(self, monkeypatch):
        monkeypatch.delenv("SITE_URL", raising=False)
        monkeypatch.delenv("NEXT_PUBLIC_SITE_URL", raising=False)

        assert TenancySettings(_env_file=None).marketing_domain is None


class TestConfigurationProviders:

    def test_environment_provider_maps_keys(self):
        settings = TenancySettings(
            _env_file=None,
            site_url="https://sjm.com",
            resend_api_key="r",
            arkesel_api_key="a",
            arkesel_sender_id="",
            from_email="noreply@sjm.com",
        )
        provider = EnvironmentConfigurationProvider(settings)

        assert provider.get(ConfigKey.MARKETING_DOMAIN) == "sjm.com"
        assert provider.get(ConfigKey.EMAIL_API_KEY) == "r"
        assert provider.get(ConfigKey.SMS_API_KEY) == "a"
        assert provider.get(ConfigKey.SMS_SENDER_ID) is None
        assert provider.get(ConfigKey.FROM_EMAIL) == "noreply@sjm.com"

    def test_static_provider_accepts_string_keys(self):
        provider = StaticConfigurationProvider({"SMS_API_KEY": "a", ConfigKey.EMAIL_API_KEY: " "})

        assert provider.get(ConfigKey.SMS_API_KEY) == "a"
        assert provider.get(ConfigKey.EMAIL_API_KEY) is None
        assert provider.get(ConfigKey.MARKETING_DOMAIN) is None

    def test_singleton_can_be_replaced(self):
        custom = StaticConfigurationProvider({})
        try:
            set_config_provider(custom)
            assert get_config_provider() is custom
        finally:
            set_config_provider(None)


class TestLoggingConfig:

    @pytest.mark.parametrize("verbosity,level", [
        ("quiet", "ERROR"),
        ("normal", "WARNING"),
        ("DEBUG", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_maps_to_level(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LOG_VERBOSITY", "debug")

        root = logging.getLogger()
        saved_level, saved_handlers = root.level, root.handlers[:]
        try:
            LoggingConfig.configure()

            assert root.level == logging.ERROR
            assert logging.getLogger("httpx").propagate is False
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            logging.getLogger("httpx").propagate = True
            logging.getLogger("asyncpg").propagate = True
