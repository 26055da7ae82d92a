"""Replica and instance client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.partitions.client import partitions_path
from servicefabric.domains.replicas.models import (
    InstanceItem,
    InstanceItemsPage,
    ReplicaItem,
    ReplicaItemsPage,
)
from servicefabric.utils.paths import escape

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


class ReplicaClient:
    """Client for replica (stateful) and instance (stateless) operations.

    Both share the GetReplicas endpoint; the caller picks the listing that
    matches the service kind.
    """

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def _replicas_path(self, app_name: str, service_name: str, partition_id: str) -> str:
        return f"{partitions_path(app_name, service_name)}{escape(partition_id)}/$/GetReplicas"

    def list_replicas(
        self,
        app_name: str,
        service_name: str,
        partition_id: str,
        *,
        timeout: float | None = None,
    ) -> list[ReplicaItem]:
        """List the replicas of a stateful partition."""
        result = self._sf.fetch_all(
            self._replicas_path(app_name, service_name, partition_id),
            ReplicaItemsPage,
            timeout=timeout,
        )
        return result.items

    def list_instances(
        self,
        app_name: str,
        service_name: str,
        partition_id: str,
        *,
        timeout: float | None = None,
    ) -> list[InstanceItem]:
        """List the instances of a stateless partition."""
        result = self._sf.fetch_all(
            self._replicas_path(app_name, service_name, partition_id),
            InstanceItemsPage,
            timeout=timeout,
        )
        return result.items
