"""Tenant domain entities.

A tenant is one school sharing the deployment. The resolvers only read
tenants; provisioning happens elsewhere.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....core.value_objects import TenantId


@dataclass
class Tenant:
    """School tenant with its optional provider credentials."""

    id: TenantId
    name: Optional[str] = None
    domain: Optional[str] = None  # unique when set
    email_provider_api_key: Optional[str] = None
    sms_provider_api_key: Optional[str] = None
    sms_sender_id: Optional[str] = None
    contact_email: Optional[str] = None
    from_email: Optional[str] = None

    @property
    def has_custom_domain(self) -> bool:
        return bool(self.domain)


@dataclass
class TenantSiteSettings:
    """Public site settings for a tenant (app_settings row)."""

    tenant_id: TenantId
    school_name: Optional[str] = None
    school_slogan: Optional[str] = None
    homepage_hero_slides: List[Dict[str, Any]] = field(default_factory=list)
    current_academic_year: Optional[str] = None
    school_address: Optional[str] = None
    school_email: Optional[str] = None
    school_phone: Optional[str] = None
