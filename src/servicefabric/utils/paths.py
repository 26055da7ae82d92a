"""Helpers for building Service Fabric REST paths."""

from urllib.parse import quote

FABRIC_SCHEME = "fabric:/"
SEGMENT_SEPARATOR = "~"


def escape(identifier: str) -> str:
    """Percent-escape an identifier for use as a single path segment.

    "~" is left alone since Service Fabric uses it as the hierarchy
    separator in resource ids.
    """
    return quote(identifier, safe=SEGMENT_SEPARATOR)


def to_resource_id(name: str) -> str:
    """Convert a Service Fabric name to the id used in URL paths.

    The fabric:/ scheme is dropped and each "/" between name segments
    becomes "~".

    Examples:
        >>> to_resource_id("fabric:/MyApp/MyService")
        'MyApp~MyService'
        >>> to_resource_id("MyApp~MyService")
        'MyApp~MyService'
        >>> to_resource_id("MyApp")
        'MyApp'
    """
    if name.startswith(FABRIC_SCHEME):
        name = name[len(FABRIC_SCHEME) :]
    return name.replace("/", SEGMENT_SEPARATOR)
