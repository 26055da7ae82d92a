"""Partition client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.partitions.models import PartitionItem, PartitionItemsPage
from servicefabric.utils.paths import escape, to_resource_id

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


def partitions_path(app_name: str, service_name: str) -> str:
    """Path of the partition listing of a service."""
    return (
        f"/Applications/{escape(to_resource_id(app_name))}"
        f"/$/GetServices/{escape(to_resource_id(service_name))}/$/GetPartitions/"
    )


class PartitionClient:
    """Client for partition operations."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def list_partitions(
        self, app_name: str, service_name: str, *, timeout: float | None = None
    ) -> list[PartitionItem]:
        """List all partitions of a service."""
        result = self._sf.fetch_all(
            partitions_path(app_name, service_name), PartitionItemsPage, timeout=timeout
        )
        return result.items
