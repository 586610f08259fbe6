"""Read-only configuration provider for the tenancy resolvers.

The resolvers receive a provider instead of reading process state, so the
set of keys they depend on is fixed and tests can supply literal values.
"""

from enum import Enum
from typing import Mapping, Optional, Protocol, Union, runtime_checkable

from .settings import TenancySettings, get_settings


class ConfigKey(str, Enum):
    """Configuration keys consumed by the resolvers."""
    MARKETING_DOMAIN = "MARKETING_DOMAIN"
    EMAIL_API_KEY = "EMAIL_API_KEY"
    SMS_API_KEY = "SMS_API_KEY"
    SMS_SENDER_ID = "SMS_SENDER_ID"
    CONTACT_EMAIL = "CONTACT_EMAIL"
    FROM_EMAIL = "FROM_EMAIL"


@runtime_checkable
class ConfigurationProvider(Protocol):
    """Protocol for read-only configuration access."""

    def get(self, key: ConfigKey) -> Optional[str]:
        """Return the configured value for key, or None when absent or blank."""
        ...


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


class EnvironmentConfigurationProvider:
    """Configuration provider backed by environment settings."""

    def __init__(self, settings: Optional[TenancySettings] = None):
        self._settings = settings or get_settings()

    @property
    def settings(self) -> TenancySettings:
        """Get settings instance."""
        return self._settings

    def get(self, key: ConfigKey) -> Optional[str]:
        s = self._settings
        values = {
            ConfigKey.MARKETING_DOMAIN: s.marketing_domain,
            ConfigKey.EMAIL_API_KEY: s.resend_api_key,
            ConfigKey.SMS_API_KEY: s.arkesel_api_key,
            ConfigKey.SMS_SENDER_ID: s.arkesel_sender_id,
            ConfigKey.CONTACT_EMAIL: s.school_contact_email,
            ConfigKey.FROM_EMAIL: s.from_email,
        }
        return _clean(values.get(ConfigKey(key)))


class StaticConfigurationProvider:
    """Configuration provider backed by a fixed mapping."""

    def __init__(self, values: Optional[Mapping[Union[ConfigKey, str], Optional[str]]] = None):
        self._values = {ConfigKey(k): v for k, v in (values or {}).items()}

    def get(self, key: ConfigKey) -> Optional[str]:
        return _clean(self._values.get(ConfigKey(key)))


# Singleton instance
_config_provider: Optional[ConfigurationProvider] = None


def get_config_provider() -> ConfigurationProvider:
    """Get singleton configuration provider.

    Returns:
        ConfigurationProvider instance
    """
    global _config_provider
    if _config_provider is None:
        _config_provider = EnvironmentConfigurationProvider()
    return _config_provider


def set_config_provider(provider: Optional[ConfigurationProvider]) -> None:
    """Set custom configuration provider for testing.

    Args:
        provider: Custom configuration provider, or None to reset
    """
    global _config_provider
    _config_provider = provider
