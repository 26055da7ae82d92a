"""Models for service types and their XML extensions.

Service manifests may attach extensions to a service type: named XML
fragments that Service Fabric itself ignores and hands back verbatim in
the service type description.
"""

from typing import Any

from pydantic import Field, RootModel
from pydantic_xml import BaseXmlModel, attr, element

from servicefabric.models.common import WireModel

LABELS_NAMESPACE = "http://schemas.microsoft.com/2015/03/fabact-no-schema"


class ServiceTypeExtension(WireModel):
    """Key and raw XML value of one extension."""

    key: str
    value: str = ""


class ServiceType(WireModel):
    """Service type description from an application type's manifest."""

    service_type_name: str
    kind: str = Field("", description="Stateful or Stateless")
    placement_constraints: str = ""
    has_persisted_state: bool = False
    is_stateful: bool = False
    extensions: list[ServiceTypeExtension] = Field(default_factory=list)


class ServiceTypeInfo(WireModel):
    """Service type together with the manifest that declares it."""

    service_type_description: ServiceType
    service_manifest_name: str = ""
    service_manifest_version: str = ""
    is_service_group: bool = False


class ServiceTypeList(RootModel[list[ServiceTypeInfo]]):
    """GetServiceTypes response body."""


def _label_map(labels: list[Any]) -> dict[str, str]:
    result: dict[str, str] = {}
    for label in labels:
        result.setdefault(label.key, label.value)
    return result


class ExtensionLabel(BaseXmlModel, tag="Label", ns="sf", nsmap={"sf": LABELS_NAMESPACE}):
    """One ``<Label Key="...">value</Label>`` entry."""

    key: str = attr(name="Key")
    value: str = ""


class ExtensionLabels(BaseXmlModel, tag="Labels", ns="sf", nsmap={"sf": LABELS_NAMESPACE}):
    """Label set commonly published as a service type extension.

    Elements must be in the fabact-no-schema namespace; use
    PlainExtensionLabels for label sets declared without one.

    Example:
        <Labels xmlns="http://schemas.microsoft.com/2015/03/fabact-no-schema">
          <Label Key="traefik.enable">true</Label>
        </Labels>
    """

    labels: list[ExtensionLabel] = element(default_factory=list)

    def as_dict(self) -> dict[str, str]:
        """Map label keys to values; the first occurrence of a key wins."""
        return _label_map(self.labels)


class PlainExtensionLabel(BaseXmlModel, tag="Label"):
    """Un-namespaced ``<Label>`` entry."""

    key: str = attr(name="Key")
    value: str = ""


class PlainExtensionLabels(BaseXmlModel, tag="Labels"):
    """Label set without an XML namespace, e.g. ``<Labels><Label Key="a">b</Label></Labels>``."""

    labels: list[PlainExtensionLabel] = element(default_factory=list)

    def as_dict(self) -> dict[str, str]:
        """Map label keys to values; the first occurrence of a key wins."""
        return _label_map(self.labels)
