from .identifiers import TenantId

__all__ = ["TenantId"]
