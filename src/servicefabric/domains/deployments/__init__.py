"""Compose deployment operations."""

from servicefabric.domains.deployments.client import DeploymentClient
from servicefabric.domains.deployments.models import (
    ComposeDeploymentStatus,
    ComposeDeploymentStatusPage,
)

__all__ = ["DeploymentClient", "ComposeDeploymentStatus", "ComposeDeploymentStatusPage"]
