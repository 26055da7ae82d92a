"""Compose deployment client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.deployments.models import (
    ComposeDeploymentStatus,
    ComposeDeploymentStatusPage,
)
from servicefabric.utils.paths import escape

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


class DeploymentClient:
    """Client for compose deployment operations."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def list_deployments(
        self, *, timeout: float | None = None
    ) -> list[ComposeDeploymentStatus]:
        """List all compose deployments in the cluster."""
        result = self._sf.fetch_all(
            "/ComposeDeployments", ComposeDeploymentStatusPage, timeout=timeout
        )
        return result.items

    def get_deployment(
        self, name: str, *, timeout: float | None = None
    ) -> ComposeDeploymentStatus:
        """Get the status of a compose deployment.

        Raises:
            NotFoundError: If the deployment does not exist
        """
        return self._sf.fetch_one(
            f"/ComposeDeployments/{escape(name)}",
            ComposeDeploymentStatus,
            "ComposeDeployment",
            name,
            timeout=timeout,
        )

    def delete_deployment(self, name: str, *, timeout: float | None = None) -> None:
        """Delete a compose deployment.

        Raises:
            NotFoundError: If the deployment is already absent
        """
        self._sf.delete(
            f"/ComposeDeployments/{escape(name)}/$/Delete",
            "ComposeDeployment",
            name,
            timeout=timeout,
        )
