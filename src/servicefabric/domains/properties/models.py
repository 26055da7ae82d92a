"""Pydantic models for Service Fabric named properties."""

from typing import Any

from pydantic import Field

from servicefabric.models.common import Page, WireModel


class PropertyValue(WireModel):
    """Typed value of a property."""

    kind: str = Field("", description="Binary, Int64, Double, String or Guid")
    data: Any = Field(None, description="Value; a byte list for Binary")


class PropertyMetadata(WireModel):
    """Metadata of a property."""

    type_id: str = Field("", description="Value kind")
    custom_type_id: str = Field("", description="Caller-defined type id")
    parent: str = Field("", description="Name that owns the property")
    size_in_bytes: int | None = None
    last_modified_utc_timestamp: str | None = None
    sequence_number: str | None = None


class PropertyInfo(WireModel):
    """Property stored under a Service Fabric name."""

    name: str = Field(..., description="Property name")
    value: PropertyValue | None = Field(None, description="Present when values were requested")
    metadata: PropertyMetadata = Field(default_factory=PropertyMetadata)


class PropertyPage(Page[PropertyInfo]):
    """Page of properties. The API lists them under ``Properties``."""

    items: list[PropertyInfo] = Field(default_factory=list, alias="Properties")
    is_consistent: bool = Field(False, description="Whether the page is a consistent snapshot")
