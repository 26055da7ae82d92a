"""Replica and instance operations."""

from servicefabric.domains.replicas.client import ReplicaClient
from servicefabric.domains.replicas.models import (
    InstanceItem,
    InstanceItemsPage,
    ReplicaItem,
    ReplicaItemsPage,
)

__all__ = [
    "ReplicaClient",
    "ReplicaItem",
    "ReplicaItemsPage",
    "InstanceItem",
    "InstanceItemsPage",
]
