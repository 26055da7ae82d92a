"""Application client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.applications.models import ApplicationItem, ApplicationItemsPage
from servicefabric.utils.paths import escape, to_resource_id

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


class ApplicationClient:
    """Client for application operations."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def list_applications(self, *, timeout: float | None = None) -> list[ApplicationItem]:
        """List all applications registered in the cluster."""
        result = self._sf.fetch_all("/Applications/", ApplicationItemsPage, timeout=timeout)
        return result.items

    def get_application(
        self, app_id: str, *, timeout: float | None = None
    ) -> ApplicationItem:
        """Get a single application.

        Args:
            app_id: Application id or fabric:/ name

        Raises:
            NotFoundError: If the application does not exist
        """
        app_id = to_resource_id(app_id)
        return self._sf.fetch_one(
            f"/Applications/{escape(app_id)}",
            ApplicationItem,
            "Application",
            app_id,
            timeout=timeout,
        )

    def delete_application(
        self,
        app_id: str,
        force_remove: bool = False,
        *,
        timeout: float | None = None,
    ) -> None:
        """Delete an application and all of its services.

        Args:
            app_id: Application id or fabric:/ name
            force_remove: Remove without waiting for graceful shutdown

        Raises:
            NotFoundError: If the application is already absent
        """
        app_id = to_resource_id(app_id)
        params = {"ForceRemove": "true"} if force_remove else None
        self._sf.delete(
            f"/Applications/{escape(app_id)}/$/Delete",
            "Application",
            app_id,
            params,
            timeout=timeout,
        )
