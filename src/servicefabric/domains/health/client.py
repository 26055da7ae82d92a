"""Cluster health client operations."""

import logging
from typing import TYPE_CHECKING

from servicefabric.domains.health.models import ClusterHealth
from servicefabric.utils.errors import ClusterHealthError, ServiceFabricError

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient

logger = logging.getLogger(__name__)


class HealthClient:
    """Client for cluster health checks."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def get_cluster_health(self, *, timeout: float | None = None) -> ClusterHealth:
        """Get the health of the cluster.

        Raises:
            ClusterHealthError: If the health could not be evaluated. The
                underlying transport, status or decode error is chained.
        """
        try:
            response = self._sf.get("/$/GetClusterHealth", timeout=timeout)
            health = self._sf.decode(response, ClusterHealth)
        except ServiceFabricError as e:
            raise ClusterHealthError(f"Could not evaluate cluster health: {e}") from e

        logger.debug(f"Cluster health: {health.aggregated_health_state.value}")
        return health

    def is_cluster_healthy(self, *, timeout: float | None = None) -> bool:
        """Check whether the cluster's aggregated health is Ok.

        Raises:
            ClusterHealthError: If the health could not be evaluated
        """
        return self.get_cluster_health(timeout=timeout).is_healthy
