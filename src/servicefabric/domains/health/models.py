"""Pydantic models for cluster health."""

from pydantic import Field

from servicefabric.models.common import HealthState, WireModel


class HealthEvent(WireModel):
    """Health report recorded against an entity."""

    source_id: str = ""
    health_property: str = Field("", alias="Property")
    health_state: HealthState = HealthState.UNKNOWN
    description: str = ""
    is_expired: bool = False


class NodeHealthState(WireModel):
    """Aggregated health of one node."""

    name: str
    aggregated_health_state: HealthState = HealthState.UNKNOWN


class ApplicationHealthState(WireModel):
    """Aggregated health of one application."""

    name: str
    aggregated_health_state: HealthState = HealthState.UNKNOWN


class ClusterHealth(WireModel):
    """Health of the cluster as evaluated by the health store."""

    aggregated_health_state: HealthState = Field(..., description="Overall cluster health")
    health_events: list[HealthEvent] = Field(default_factory=list)
    node_health_states: list[NodeHealthState] = Field(default_factory=list)
    application_health_states: list[ApplicationHealthState] = Field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        return self.aggregated_health_state == HealthState.OK

    def unhealthy_nodes(self) -> list[str]:
        """Names of nodes whose health is Warning or Error."""
        return [
            node.name
            for node in self.node_health_states
            if node.aggregated_health_state in (HealthState.WARNING, HealthState.ERROR)
        ]
