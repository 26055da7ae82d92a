"""Partition operations."""

from servicefabric.domains.partitions.client import PartitionClient
from servicefabric.domains.partitions.models import (
    ConfigurationEpoch,
    PartitionInformation,
    PartitionItem,
    PartitionItemsPage,
)

__all__ = [
    "PartitionClient",
    "PartitionItem",
    "PartitionItemsPage",
    "PartitionInformation",
    "ConfigurationEpoch",
]
