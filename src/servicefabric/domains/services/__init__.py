"""Service operations."""

from servicefabric.domains.services.client import ServiceClient
from servicefabric.domains.services.models import ServiceItem, ServiceItemsPage

__all__ = ["ServiceClient", "ServiceItem", "ServiceItemsPage"]
