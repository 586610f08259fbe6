"""Configuration management for edusync-tenancy."""

from .constants import APP_ROUTES, PREVIEW_HOST_MARKER, DEFAULT_SMS_SENDER_ID
from .settings import TenancySettings, get_settings, extract_hostname
from .provider import (
    ConfigKey,
    ConfigurationProvider,
    EnvironmentConfigurationProvider,
    StaticConfigurationProvider,
    get_config_provider,
    set_config_provider,
)
from .logging_config import LoggingConfig, setup_logging, get_logger

__all__ = [
    "APP_ROUTES",
    "PREVIEW_HOST_MARKER",
    "DEFAULT_SMS_SENDER_ID",
    "TenancySettings",
    "get_settings",
    "extract_hostname",
    "ConfigKey",
    "ConfigurationProvider",
    "EnvironmentConfigurationProvider",
    "StaticConfigurationProvider",
    "get_config_provider",
    "set_config_provider",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
