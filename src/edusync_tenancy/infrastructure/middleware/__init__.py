from .tenant_middleware import TenantRewriteMiddleware

__all__ = ["TenantRewriteMiddleware"]
