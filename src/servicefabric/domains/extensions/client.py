"""Service type extension operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from pydantic_xml import BaseXmlModel
from pydantic_xml.errors import BaseError as XmlModelError

from servicefabric.domains.extensions.models import ServiceTypeInfo, ServiceTypeList
from servicefabric.utils.errors import DecodeError
from servicefabric.utils.paths import escape

if TYPE_CHECKING:
    from servicefabric.clients.base import ServiceFabricClient

logger = logging.getLogger(__name__)

XmlT = TypeVar("XmlT", bound=BaseXmlModel)


def find_extension(
    service_types: list[ServiceTypeInfo],
    service_type_name: str,
    extension_key: str,
) -> str | None:
    """Find the raw XML value of an extension.

    The first service type whose name equals service_type_name exactly is
    searched for the first extension whose key matches extension_key,
    ignoring case. Later service types with the same name are not
    considered.

    Returns:
        The raw XML value, or None if the type or the key is absent.
    """
    wanted_key = extension_key.casefold()
    for info in service_types:
        description = info.service_type_description
        if description.service_type_name != service_type_name:
            continue
        for extension in description.extensions:
            if extension.key.casefold() == wanted_key:
                return extension.value
        logger.debug(f"Service type {service_type_name} has no extension {extension_key}")
        return None

    logger.debug(f"No service type named {service_type_name}")
    return None


def decode_extension(raw_xml: str, target: type[XmlT]) -> XmlT:
    """Decode an extension's XML value into a target model.

    Raises:
        DecodeError: If the XML is malformed or does not fit the target.
    """
    try:
        return target.from_xml(raw_xml.encode("utf-8"))
    except (ValueError, SyntaxError, XmlModelError) as e:
        raise DecodeError(
            f"Could not deserialise extension's XML value into {target.__name__}: {e}"
        ) from e


class ExtensionClient:
    """Client for service types and their extensions."""

    def __init__(self, sf: ServiceFabricClient) -> None:
        self._sf = sf

    def get_service_types(
        self,
        app_type: str,
        app_type_version: str,
        *,
        timeout: float | None = None,
    ) -> list[ServiceTypeInfo]:
        """List the service types of an application type version."""
        response = self._sf.get(
            f"/ApplicationTypes/{escape(app_type)}/$/GetServiceTypes",
            {"ApplicationTypeVersion": app_type_version},
            timeout=timeout,
        )
        return self._sf.decode(response, ServiceTypeList).root

    def get_extension_value(
        self,
        app_type: str,
        app_type_version: str,
        service_type_name: str,
        extension_key: str,
        *,
        timeout: float | None = None,
    ) -> str | None:
        """Get the raw XML of a service type extension, or None if absent."""
        service_types = self.get_service_types(app_type, app_type_version, timeout=timeout)
        return find_extension(service_types, service_type_name, extension_key)

    def resolve_extension(
        self,
        app_type: str,
        app_type_version: str,
        service_type_name: str,
        extension_key: str,
        target: type[XmlT],
        *,
        timeout: float | None = None,
    ) -> XmlT | None:
        """Resolve a service type extension into a typed model.

        Service type names are matched exactly; extension keys are matched
        ignoring case. The first match wins at both levels.

        Args:
            app_type: Application type name
            app_type_version: Application type version
            service_type_name: Service type to look in, e.g. ServiceItem.type_name
            extension_key: Extension key
            target: pydantic-xml model to decode the extension into

        Returns:
            The decoded extension, or None if the service type or the
            extension does not exist.

        Raises:
            DecodeError: If the extension exists but does not fit target
        """
        raw_xml = self.get_extension_value(
            app_type,
            app_type_version,
            service_type_name,
            extension_key,
            timeout=timeout,
        )
        if raw_xml is None:
            return None
        return decode_extension(raw_xml, target)
