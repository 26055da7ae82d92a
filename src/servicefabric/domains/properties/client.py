"""Property client operations."""

from typing import TYPE_CHECKING

from servicefabric.domains.properties.models import PropertyInfo, PropertyPage
from servicefabric.utils.paths import escape, to_resource_id

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient


class PropertyClient:
    """Client for properties stored under Service Fabric names."""

    def __init__(self, sf: "ServiceFabricClient") -> None:
        self._sf = sf

    def list_properties(
        self,
        name: str,
        include_values: bool = True,
        *,
        timeout: float | None = None,
    ) -> list[PropertyInfo]:
        """List the properties of a name.

        Args:
            name: Service Fabric name, with or without the fabric:/ scheme
            include_values: Return property values alongside metadata
        """
        result = self._sf.fetch_all(
            f"/Names/{escape(to_resource_id(name))}/$/GetProperties",
            PropertyPage,
            {"IncludeValues": "true" if include_values else "false"},
            timeout=timeout,
        )
        return result.items

    def get_property_values(
        self, name: str, *, timeout: float | None = None
    ) -> dict[str, object]:
        """Map property names to their values."""
        return {
            prop.name: prop.value.data if prop.value else None
            for prop in self.list_properties(name, timeout=timeout)
        }
