"""Per-tenant provider credential resolution with environment fallback.

Each field independently prefers the tenant row's non-empty value, then the
process-wide default, and is otherwise absent. A missing tenant id, a
missing row and a failed lookup all resolve to the defaults; this service
never raises to its caller.
"""

import logging
from typing import Any, Optional

from ....config.provider import ConfigKey, ConfigurationProvider
from ....core.value_objects import TenantId
from ...tenants.entities import Tenant, TenantRepository
from ..entities.credential_set import CredentialField, ResolvedCredentialSet, SmsCredentials


logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve email and SMS provider credentials for a tenant."""

    def __init__(self, tenant_repository: TenantRepository, config_provider: ConfigurationProvider):
        self._tenants = tenant_repository
        self._config = config_provider

    async def resolve(self, tenant_id: Any = None) -> ResolvedCredentialSet:
        """Resolve credentials for tenant_id (None for the default deployment)."""
        tenant = await self._load_tenant(tenant_id)

        return ResolvedCredentialSet(
            email_api_key=self._pick(tenant and tenant.email_provider_api_key, ConfigKey.EMAIL_API_KEY),
            sms=SmsCredentials(
                api_key=self._pick(tenant and tenant.sms_provider_api_key, ConfigKey.SMS_API_KEY),
                sender_id=self._pick(tenant and tenant.sms_sender_id, ConfigKey.SMS_SENDER_ID),
            ),
            school_name=self._pick(tenant and tenant.name, None),
            contact_email=self._pick(tenant and tenant.contact_email, ConfigKey.CONTACT_EMAIL),
            from_email=self._pick(tenant and tenant.from_email, ConfigKey.FROM_EMAIL),
        )

    async def _load_tenant(self, tenant_id: Any) -> Optional[Tenant]:
        try:
            key = TenantId.coerce(tenant_id)
        except ValueError as e:
            logger.warning(f"Ignoring invalid tenant id {tenant_id!r}: {e}")
            return None

        if key is None:
            return None

        # Single attempt; a failure counts as "not found"
        try:
            tenant = await self._tenants.find_by_id(key)
        except Exception as e:
            logger.warning(f"Credential lookup failed for tenant {key}, using defaults: {e}")
            return None

        if tenant is None:
            logger.info(f"No tenant row for {key}, using default credentials")
        return tenant

    def _pick(self, tenant_value: Optional[str], default_key: Optional[ConfigKey]) -> CredentialField:
        if tenant_value and str(tenant_value).strip():
            return CredentialField.from_tenant(tenant_value)

        default = self._config.get(default_key) if default_key else None
        if default:
            return CredentialField.from_default(default)

        return CredentialField.absent()
