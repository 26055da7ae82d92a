"""Utility functions and helpers for the Service Fabric client."""

from servicefabric.utils.errors import (
    ClusterHealthError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    HTTPStatusError,
    NotFoundError,
    PaginationLimitError,
    ServiceFabricError,
    TransportError,
)
from servicefabric.utils.paths import escape, to_resource_id

__all__ = [
    # Errors
    "ServiceFabricError",
    "ErrorKind",
    "ConfigurationError",
    "TransportError",
    "HTTPStatusError",
    "DecodeError",
    "NotFoundError",
    "ClusterHealthError",
    "PaginationLimitError",
    # Paths
    "escape",
    "to_resource_id",
]
