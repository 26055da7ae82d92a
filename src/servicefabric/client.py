"""Facade bundling the per-resource clients."""

from __future__ import annotations

from typing import Any

import httpx

from servicefabric.auth import AuthConfig
from servicefabric.clients.base import ServiceFabricClient
from servicefabric.config import ServiceFabricConfig
from servicefabric.domains.applications.client import ApplicationClient
from servicefabric.domains.deployments.client import DeploymentClient
from servicefabric.domains.extensions.client import ExtensionClient
from servicefabric.domains.health.client import HealthClient
from servicefabric.domains.partitions.client import PartitionClient
from servicefabric.domains.properties.client import PropertyClient
from servicefabric.domains.replicas.client import ReplicaClient
from servicefabric.domains.services.client import ServiceClient


class ServiceFabric:
    """All resource clients sharing one ServiceFabricClient connection.

    Usage:
        with ServiceFabric.from_config(ServiceFabricConfig()) as sf:
            for app in sf.applications.list_applications():
                services = sf.services.list_services(app.id)
    """

    def __init__(self, client: ServiceFabricClient) -> None:
        self.client = client
        self.applications = ApplicationClient(client)
        self.services = ServiceClient(client)
        self.partitions = PartitionClient(client)
        self.replicas = ReplicaClient(client)
        self.properties = PropertyClient(client)
        self.deployments = DeploymentClient(client)
        self.health = HealthClient(client)
        self.extensions = ExtensionClient(client)

    @classmethod
    def connect(
        cls,
        endpoint: str,
        api_version: str,
        auth: AuthConfig | None = None,
        **kwargs: Any,
    ) -> ServiceFabric:
        """Create a connection; keyword arguments go to ServiceFabricClient."""
        return cls(ServiceFabricClient(endpoint, api_version, auth, **kwargs))

    @classmethod
    def from_config(
        cls,
        config: ServiceFabricConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> ServiceFabric:
        return cls(ServiceFabricClient.from_config(config, transport=transport))

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> ServiceFabric:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
