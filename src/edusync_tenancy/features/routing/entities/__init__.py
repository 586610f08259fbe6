from .routing_decision import RoutingDecision, RoutingDecisionKind

__all__ = ["RoutingDecision", "RoutingDecisionKind"]
