"""Client for the Service Fabric cluster management REST API."""

from servicefabric.auth import AuthConfig, BasicAuthNTLM, CertAuth, NoAuth
from servicefabric.client import ServiceFabric
from servicefabric.clients.base import ServiceFabricClient
from servicefabric.config import AuthMode, ServiceFabricConfig
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

__version__ = "0.1.0"

__all__ = [
    "ServiceFabric",
    "ServiceFabricClient",
    "ServiceFabricConfig",
    "AuthMode",
    # Auth
    "AuthConfig",
    "NoAuth",
    "CertAuth",
    "BasicAuthNTLM",
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
]
