"""Pydantic models for Service Fabric applications."""

from pydantic import Field

from servicefabric.models.common import HealthState, Page, WireModel


class AppParameter(WireModel):
    """Application parameter override."""

    key: str = Field(..., description="Parameter name")
    value: str = Field("", description="Parameter value")


class ApplicationItem(WireModel):
    """Application deployed in the cluster."""

    id: str = Field(..., description="Application id (name without fabric:/)")
    name: str = Field(..., description="Application name, e.g. fabric:/MyApp")
    type_name: str = Field("", description="Application type name")
    type_version: str = Field("", description="Application type version")
    status: str = Field("", description="Ready, Upgrading, Creating, Deleting, Failed")
    health_state: HealthState = Field(HealthState.UNKNOWN, description="Health state")
    parameters: list[AppParameter] = Field(default_factory=list, description="Parameters")

    def parameter(self, key: str) -> str | None:
        """Get a parameter value by name."""
        for param in self.parameters:
            if param.key == key:
                return param.value
        return None


class ApplicationItemsPage(Page[ApplicationItem]):
    """Page of applications."""
