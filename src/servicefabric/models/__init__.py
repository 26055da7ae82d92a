"""Shared models for Service Fabric resources."""

from servicefabric.models.common import (
    AggregateResult,
    HealthState,
    Page,
    ReplicaItemBase,
    WireModel,
)

__all__ = [
    "AggregateResult",
    "HealthState",
    "Page",
    "ReplicaItemBase",
    "WireModel",
]
