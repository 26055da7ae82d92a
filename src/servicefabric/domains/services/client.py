"""Service client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.services.models import ServiceItem, ServiceItemsPage
from servicefabric.utils.paths import escape, to_resource_id

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


class ServiceClient:
    """Client for service operations."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def list_services(self, app_name: str, *, timeout: float | None = None) -> list[ServiceItem]:
        """List all services of an application.

        Args:
            app_name: Application id or fabric:/ name
        """
        app_id = escape(to_resource_id(app_name))
        result = self._sf.fetch_all(
            f"/Applications/{app_id}/$/GetServices", ServiceItemsPage, timeout=timeout
        )
        return result.items

    def delete_service(
        self,
        service_id: str,
        force_remove: bool = False,
        *,
        timeout: float | None = None,
    ) -> None:
        """Delete a service.

        Args:
            service_id: Service id or fabric:/ name
            force_remove: Remove without waiting for graceful shutdown

        Raises:
            NotFoundError: If the service is already absent
        """
        service_id = to_resource_id(service_id)
        params = {"ForceRemove": "true"} if force_remove else None
        self._sf.delete(
            f"/Services/{escape(service_id)}/$/Delete",
            "Service",
            service_id,
            params,
            timeout=timeout,
        )
