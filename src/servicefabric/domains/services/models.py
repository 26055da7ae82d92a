"""Pydantic models for Service Fabric services."""

from pydantic import Field

from servicefabric.models.common import HealthState, Page, WireModel


class ServiceItem(WireModel):
    """Service belonging to an application."""

    id: str = Field(..., description="Service id")
    name: str = Field(..., description="Service name, e.g. fabric:/MyApp/MyService")
    service_kind: str = Field("", description="Stateful or Stateless")
    type_name: str = Field("", description="Service type name")
    manifest_version: str = Field("", description="Service manifest version")
    health_state: HealthState = Field(HealthState.UNKNOWN, description="Health state")
    service_status: str = Field("", description="Active, Upgrading, Deleting, ...")
    is_service_group: bool = Field(False, description="Whether this is a service group")
    has_persisted_state: bool = Field(False, description="Stateful services only")

    @property
    def is_stateful(self) -> bool:
        return self.service_kind == "Stateful"


class ServiceItemsPage(Page[ServiceItem]):
    """Page of services."""
