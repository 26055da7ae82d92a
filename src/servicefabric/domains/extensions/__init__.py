"""Service type extension operations."""

from servicefabric.domains.extensions.client import (
    ExtensionClient,
    decode_extension,
    find_extension,
)
from servicefabric.domains.extensions.models import (
    ExtensionLabel,
    ExtensionLabels,
    PlainExtensionLabel,
    PlainExtensionLabels,
    ServiceType,
    ServiceTypeExtension,
    ServiceTypeInfo,
    ServiceTypeList,
)

__all__ = [
    "ExtensionClient",
    "decode_extension",
    "find_extension",
    "ExtensionLabel",
    "ExtensionLabels",
    "PlainExtensionLabel",
    "PlainExtensionLabels",
    "ServiceType",
    "ServiceTypeExtension",
    "ServiceTypeInfo",
    "ServiceTypeList",
]
