"""Cluster health operations."""

from servicefabric.domains.health.client import HealthClient
from servicefabric.domains.health.models import (
    ApplicationHealthState,
    ClusterHealth,
    HealthEvent,
    NodeHealthState,
)

__all__ = [
    "HealthClient",
    "ClusterHealth",
    "HealthEvent",
    "NodeHealthState",
    "ApplicationHealthState",
]
