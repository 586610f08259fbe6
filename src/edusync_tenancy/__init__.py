"""EduSync tenancy - tenant routing and provider credential resolution.

Maps school custom domains onto a single tenant route segment and resolves
per-school SMS/email provider credentials with environment fallbacks.
"""

from .__version__ import __version__

from .config import (
    ConfigKey,
    ConfigurationProvider,
    EnvironmentConfigurationProvider,
    StaticConfigurationProvider,
    TenancySettings,
    get_settings,
)

from .core.exceptions import (
    EduSyncError,
    ConfigurationError,
    DatabaseError,
    TenantError,
    TenantNotFoundError,
    NotificationError,
    CredentialsNotConfiguredError,
    InvalidRecipientError,
    create_error_response,
)

from .core.value_objects import TenantId

from .features.tenants import Tenant, TenantSiteSettings, TenantRepository, TenantDatabaseRepository
from .features.routing import RoutingDecision, RoutingDecisionKind, TenantResolver
from .features.credentials import (
    CredentialSource,
    CredentialField,
    SmsCredentials,
    ResolvedCredentialSet,
    CredentialResolver,
)
from .features.notifications import ArkeselSmsService, ResendEmailService, format_phone_number_e164
from .features.sites import SiteContext, TenantSiteService

__all__ = [
    "__version__",
    "ConfigKey",
    "ConfigurationProvider",
    "EnvironmentConfigurationProvider",
    "StaticConfigurationProvider",
    "TenancySettings",
    "get_settings",
    "EduSyncError",
    "ConfigurationError",
    "DatabaseError",
    "TenantError",
    "TenantNotFoundError",
    "NotificationError",
    "CredentialsNotConfiguredError",
    "InvalidRecipientError",
    "create_error_response",
    "TenantId",
    "Tenant",
    "TenantSiteSettings",
    "TenantRepository",
    "TenantDatabaseRepository",
    "RoutingDecision",
    "RoutingDecisionKind",
    "TenantResolver",
    "CredentialSource",
    "CredentialField",
    "SmsCredentials",
    "ResolvedCredentialSet",
    "CredentialResolver",
    "ArkeselSmsService",
    "ResendEmailService",
    "format_phone_number_e164",
    "SiteContext",
    "TenantSiteService",
]
