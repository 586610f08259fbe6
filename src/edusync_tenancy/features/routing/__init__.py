"""Tenant routing: host classification and path rewriting."""

from .entities import RoutingDecision, RoutingDecisionKind
from .services import TenantResolver

__all__ = ["RoutingDecision", "RoutingDecisionKind", "TenantResolver"]
