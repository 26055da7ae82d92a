"""Pydantic models for replicas and instances.

Stateful partitions run replicas, stateless partitions run instances. Both
carry the same ReplicaItemBase fields, embedded as ``base``.
"""

from typing import Any

from pydantic import Field, model_validator

from servicefabric.models.common import Page, ReplicaItemBase, WireModel, embed_replica_base


class ReplicaItem(WireModel):
    """Replica of a stateful partition."""

    replica_id: str = Field(..., description="Replica id")
    base: ReplicaItemBase

    @model_validator(mode="before")
    @classmethod
    def lift_base(cls, data: Any) -> Any:
        return embed_replica_base(data)

    @property
    def endpoints(self) -> dict[str, str]:
        return self.base.endpoints


class InstanceItem(WireModel):
    """Instance of a stateless partition."""

    instance_id: str = Field(..., description="Instance id")
    base: ReplicaItemBase

    @model_validator(mode="before")
    @classmethod
    def lift_base(cls, data: Any) -> Any:
        return embed_replica_base(data)

    @property
    def endpoints(self) -> dict[str, str]:
        return self.base.endpoints


class ReplicaItemsPage(Page[ReplicaItem]):
    """Page of replicas."""


class InstanceItemsPage(Page[InstanceItem]):
    """Page of instances."""
