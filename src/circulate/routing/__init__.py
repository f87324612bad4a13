"""Routing — static route classification and the allow/redirect gate."""

from circulate.routing.gate import ALLOW, Allow, Redirect, RouteGate, RoutingDecision, decide
from circulate.routing.table import RouteTable

__all__ = [
    "ALLOW",
    "Allow",
    "Redirect",
    "RouteGate",
    "RouteTable",
    "RoutingDecision",
    "decide",
]
