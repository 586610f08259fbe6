from .responses import BrandingSettings, ContactInfo, SiteContext

__all__ = ["BrandingSettings", "ContactInfo", "SiteContext"]
