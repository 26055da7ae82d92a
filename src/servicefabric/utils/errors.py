"""Error types raised by the Service Fabric client.

Every exception derives from ServiceFabricError and carries an ErrorKind so
callers can branch on the kind of failure, e.g. to treat a NotFoundError on
delete as an idempotent success.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of client failures."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    NOT_FOUND = "not_found"
    CLUSTER_HEALTH = "cluster_health"
    PAGINATION_LIMIT = "pagination_limit"


class ServiceFabricError(Exception):
    """Base exception for Service Fabric client errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(ServiceFabricError):
    """Client construction arguments are missing or invalid."""

    kind = ErrorKind.CONFIGURATION


class TransportError(ServiceFabricError):
    """Connection, DNS or TLS failure while talking to the cluster."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, method: str, url: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"Failed to connect to Service Fabric on {method} {url}: {message}")


class HTTPStatusError(ServiceFabricError):
    """The cluster answered with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, body: str, method: str, url: str) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(
            f"Service Fabric responded with status {status_code} to {method} {url}: {body}"
        )


class DecodeError(ServiceFabricError):
    """A JSON or XML payload could not be decoded into the expected shape."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} (from {source})"
        super().__init__(message)


class NotFoundError(ServiceFabricError):
    """The cluster confirmed that a resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource_kind: str, name: str, status_code: int | None = None) -> None:
        self.resource_kind = resource_kind
        self.name = name
        self.status_code = status_code
        super().__init__(f"{resource_kind} '{name}' not found")


class ClusterHealthError(ServiceFabricError):
    """Cluster health could not be evaluated."""

    kind = ErrorKind.CLUSTER_HEALTH


class PaginationLimitError(ServiceFabricError):
    """A paginated listing returned more pages than the configured limit."""

    kind = ErrorKind.PAGINATION_LIMIT

    def __init__(self, path: str, max_pages: int) -> None:
        self.path = path
        self.max_pages = max_pages
        super().__init__(f"Listing {path} exceeded the limit of {max_pages} pages")
