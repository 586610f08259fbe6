from .tenant_resolver import TenantResolver, strip_port

__all__ = ["TenantResolver", "strip_port"]
