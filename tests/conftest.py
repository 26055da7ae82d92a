"""Shared pytest fixtures for Service Fabric client tests."""

from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from servicefabric.clients.base import ServiceFabricClient

ENDPOINT = "http://sf.test:19080"
API_VERSION = "1.0"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_sf() -> Generator[Callable[..., ServiceFabricClient], Any, None]:
    """Factory for clients whose requests are answered by a handler function."""
    clients: list[ServiceFabricClient] = []

    def _make(handler: Handler, **kwargs: Any) -> ServiceFabricClient:
        sf = ServiceFabricClient(
            ENDPOINT,
            API_VERSION,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        clients.append(sf)
        return sf

    yield _make
    for sf in clients:
        sf.close()


@pytest.fixture
def applications_page() -> dict[str, Any]:
    """First page of the applications listing, pointing at a second page."""
    return {
        "ContinuationToken": "00001234",
        "Items": [
            {
                "HealthState": "Ok",
                "Id": "TestApplication",
                "Name": "fabric:/TestApplication",
                "Parameters": [
                    {"Key": "Param1", "Value": "Value1"},
                    {"Key": "Param2", "Value": "Value2"},
                ],
                "Status": "Ready",
                "TypeName": "TestApplicationType",
                "TypeVersion": "1.0.0",
            },
            {
                "HealthState": "Ok",
                "Id": "TestApplication2",
                "Name": "fabric:/TestApplication2",
                "Parameters": [
                    {"Key": "Param1", "Value": "Value1"},
                    {"Key": "Param2", "Value": "Value2"},
                ],
                "Status": "Ready",
                "TypeName": "TestApplication2Type",
                "TypeVersion": "1.0.0",
            },
        ],
    }


@pytest.fixture
def services_page() -> dict[str, Any]:
    """Single page of services of TestApplication."""
    return {
        "ContinuationToken": "",
        "Items": [
            {
                "HasPersistedState": True,
                "HealthState": "Ok",
                "Id": "TestApplication/TestService",
                "IsServiceGroup": False,
                "ManifestVersion": "1.0.0",
                "Name": "fabric:/TestApplication/TestService",
                "ServiceKind": "Stateful",
                "ServiceStatus": "Active",
                "TypeName": "TestServiceType",
            }
        ],
    }


@pytest.fixture
def partitions_page() -> dict[str, Any]:
    """Single page of partitions of a stateful service."""
    return {
        "ContinuationToken": "",
        "Items": [
            {
                "CurrentConfigurationEpoch": {
                    "ConfigurationVersion": "12884901891",
                    "DataLossVersion": "131496928071680379",
                },
                "HealthState": "Ok",
                "MinReplicaSetSize": 3,
                "PartitionInformation": {
                    "HighKey": "9223372036854775807",
                    "Id": "bce46a8c-b62d-4996-89dc-7ffc00a96902",
                    "LowKey": "-9223372036854775808",
                    "ServicePartitionKind": "Int64Range",
                },
                "PartitionStatus": "Ready",
                "ServiceKind": "Stateful",
                "TargetReplicaSetSize": 3,
            }
        ],
    }


@pytest.fixture
def replicas_page() -> dict[str, Any]:
    """Single page of replicas of a stateful partition."""
    return {
        "ContinuationToken": "",
        "Items": [
            {
                "Address": (
                    '{"Endpoints":{"":"localhost:30001+bce46a8c-b62d-4996-89dc-'
                    '7ffc00a96902-131496928082309293"}}'
                ),
                "HealthState": "Ok",
                "LastInBuildDurationInSeconds": "1",
                "NodeName": "_Node_0",
                "ReplicaId": "131496928082309293",
                "ReplicaRole": "Primary",
                "ReplicaStatus": "Ready",
                "ServiceKind": "Stateful",
            }
        ],
    }


@pytest.fixture
def instances_page() -> dict[str, Any]:
    """Single page of instances of a stateless partition."""
    return {
        "ContinuationToken": "",
        "Items": [
            {
                "Address": '{"Endpoints":{"":"http:\\/\\/localhost:8081"}}',
                "HealthState": "Ok",
                "InstanceId": "131497042182378182",
                "LastInBuildDurationInSeconds": "3",
                "NodeName": "_Node_0",
                "ReplicaStatus": "Ready",
                "ServiceKind": "Stateless",
            }
        ],
    }


@pytest.fixture
def service_types() -> list[dict[str, Any]]:
    """GetServiceTypes response with one extension-bearing service type."""
    return [
        {
            "ServiceTypeDescription": {
                "IsStateful": True,
                "ServiceTypeName": "Test",
                "PlacementConstraints": "",
                "HasPersistedState": True,
                "Kind": "Stateful",
                "Extensions": [
                    {
                        "Key": "Test",
                        "Value": '<Tests><Test Key="key1">value1</Test></Tests>',
                    }
                ],
                "LoadMetrics": [],
                "ServicePlacementPolicies": [],
            },
            "ServiceManifestVersion": "1.0.0",
            "ServiceManifestName": "TestServicePkg",
            "IsServiceGroup": False,
        }
    ]
