"""Routing decision produced for each inbound request."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RoutingDecisionKind(str, Enum):
    """How an inbound request is routed."""
    PASSTHROUGH = "passthrough"
    INTERNAL_APP_ROUTE = "internal_app_route"
    MAIN_DOMAIN = "main_domain"
    TENANT_REWRITE = "tenant_rewrite"


@dataclass(frozen=True)
class RoutingDecision:
    """Ephemeral routing decision for one request.

    ``path`` is the path to serve: the original path for every kind except
    TENANT_REWRITE, where it carries the tenant host as its first segment.
    The query string is never modified.
    """

    kind: RoutingDecisionKind
    path: str
    query_string: str = ""
    tenant_host: Optional[str] = None

    @classmethod
    def passthrough(cls, path: str, query_string: str = "") -> "RoutingDecision":
        return cls(RoutingDecisionKind.PASSTHROUGH, path, query_string)

    @classmethod
    def internal_app_route(cls, path: str, query_string: str = "") -> "RoutingDecision":
        return cls(RoutingDecisionKind.INTERNAL_APP_ROUTE, path, query_string)

    @classmethod
    def main_domain(cls, path: str, query_string: str = "") -> "RoutingDecision":
        return cls(RoutingDecisionKind.MAIN_DOMAIN, path, query_string)

    @classmethod
    def tenant_rewrite(cls, host: str, path: str, query_string: str = "") -> "RoutingDecision":
        return cls(RoutingDecisionKind.TENANT_REWRITE, f"/{host}{path}", query_string, tenant_host=host)

    @property
    def is_rewrite(self) -> bool:
        return self.kind is RoutingDecisionKind.TENANT_REWRITE

    @property
    def url(self) -> str:
        """Path plus query string, as served."""
        return f"{self.path}?{self.query_string}" if self.query_string else self.path
