"""Service Fabric REST clients."""

from servicefabric.clients.base import ServiceFabricClient

__all__ = ["ServiceFabricClient"]
