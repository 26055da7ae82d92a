"""Pydantic models for Service Fabric partitions."""

from pydantic import Field

from servicefabric.models.common import HealthState, Page, WireModel


class PartitionInformation(WireModel):
    """Partitioning scheme of a partition."""

    id: str = Field(..., description="Partition id")
    service_partition_kind: str = Field("", description="Singleton, Int64Range or Named")
    low_key: str | None = Field(None, description="Low key (Int64Range)")
    high_key: str | None = Field(None, description="High key (Int64Range)")
    name: str | None = Field(None, description="Partition name (Named)")


class ConfigurationEpoch(WireModel):
    """Reconfiguration epoch of a stateful partition."""

    configuration_version: str = ""
    data_loss_version: str = ""


class PartitionItem(WireModel):
    """Partition of a stateful or stateless service."""

    service_kind: str = Field("", description="Stateful or Stateless")
    partition_information: PartitionInformation
    target_replica_set_size: int | None = Field(None, description="Stateful services only")
    min_replica_set_size: int | None = Field(None, description="Stateful services only")
    instance_count: int | None = Field(None, description="Stateless services only")
    health_state: HealthState = Field(HealthState.UNKNOWN, description="Health state")
    partition_status: str = Field("", description="Ready, NotReady, InQuorumLoss, ...")
    current_configuration_epoch: ConfigurationEpoch | None = None

    @property
    def id(self) -> str:
        return self.partition_information.id


class PartitionItemsPage(Page[PartitionItem]):
    """Page of partitions."""
