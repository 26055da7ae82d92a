"""Common Pydantic models shared across Service Fabric resources."""

import json
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

T = TypeVar("T")


class WireModel(BaseModel):
    """Base for models decoded from Service Fabric JSON.

    The REST API uses PascalCase keys; models expose snake_case attributes
    and accept either spelling on input.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


class HealthState(str, Enum):
    """Aggregated health state reported by the cluster."""

    INVALID = "Invalid"
    OK = "Ok"
    WARNING = "Warning"
    ERROR = "Error"
    UNKNOWN = "Unknown"


class Page(WireModel, Generic[T]):
    """One page of a paginated listing."""

    continuation_token: str | None = Field(None, description="Cursor for the next page")
    items: list[T] = Field(default_factory=list, description="Items on this page")

    @property
    def has_more(self) -> bool:
        """Whether the server indicated further pages."""
        return bool(self.continuation_token)


class AggregateResult(BaseModel, Generic[T]):
    """Items from every page of a listing, in server order."""

    items: list[T] = Field(default_factory=list)
    pages: int = Field(0, description="Number of pages fetched")


class ReplicaItemBase(WireModel):
    """Fields shared by stateful replicas and stateless instances."""

    address: str = Field("", description="JSON-encoded endpoint map")
    health_state: HealthState = Field(HealthState.UNKNOWN, description="Health state")
    last_in_build_duration_in_seconds: str | None = Field(None, description="Last build duration")
    node_name: str | None = Field(None, description="Node hosting the replica")
    replica_role: str | None = Field(None, description="Primary, ActiveSecondary, ...")
    replica_status: str | None = Field(None, description="Ready, Down, ...")
    service_kind: str | None = Field(None, description="Stateful or Stateless")

    @property
    def endpoints(self) -> dict[str, str]:
        """Decode the Address field into a listener-name to endpoint map.

        Returns an empty dict when the address is not a JSON endpoint map.
        """
        try:
            data = json.loads(self.address)
        except (TypeError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        endpoints = data.get("Endpoints")
        if not isinstance(endpoints, dict):
            return {}
        return {str(k): str(v) for k, v in endpoints.items()}


def embed_replica_base(data: Any) -> Any:
    """Lift the flat replica payload into an embedded ``Base`` field."""
    if isinstance(data, dict) and "base" not in data and "Base" not in data:
        return {**data, "Base": data}
    return data
