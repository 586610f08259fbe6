"""Response models for tenant public sites."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class BrandingSettings(BaseModel):
    """Branding shown on a tenant's home page."""

    school_name: str
    school_slogan: str
    homepage_hero_slides: List[Dict[str, Any]] = Field(default_factory=list)
    current_academic_year: Optional[str] = None


class ContactInfo(BaseModel):
    """Footer contact details."""

    address: str
    email: str
    phone: str


class SiteContext(BaseModel):
    """Everything a tenant page needs, with defaults already applied."""

    domain: str
    page: str = ""
    tenant_id: Optional[str] = None
    is_default: bool = True
    branding: BrandingSettings
    contact_info: ContactInfo
