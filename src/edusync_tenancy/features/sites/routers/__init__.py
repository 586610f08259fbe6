from .site_router import router, get_site_service

__all__ = ["router", "get_site_service"]
