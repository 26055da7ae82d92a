"""Named property operations."""

from servicefabric.domains.properties.client import PropertyClient
from servicefabric.domains.properties.models import (
    PropertyInfo,
    PropertyMetadata,
    PropertyPage,
    PropertyValue,
)

__all__ = ["PropertyClient", "PropertyInfo", "PropertyMetadata", "PropertyPage", "PropertyValue"]
