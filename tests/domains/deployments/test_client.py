"""Tests for DeploymentClient."""

from typing import Any

import httpx
import pytest

from servicefabric.domains.deployments.client import DeploymentClient
from servicefabric.domains.deployments.models import ComposeDeploymentStatus
from servicefabric.utils.errors import HTTPStatusError, NotFoundError

DEPLOYMENT = {
    "Name": "mystack",
    "ApplicationName": "fabric:/mystack",
    "Status": "Ready",
    "StatusDetails": "",
}


class TestDeploymentClient:
    """Test DeploymentClient operations."""

    def test_list_deployments(self, make_sf: Any) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/ComposeDeployments"
            return httpx.Response(200, json={"ContinuationToken": "", "Items": [DEPLOYMENT]})

        client = DeploymentClient(make_sf(handler))

        assert client.list_deployments() == [
            ComposeDeploymentStatus(
                name="mystack", application_name="fabric:/mystack", status="Ready"
            )
        ]

    def test_get_deployment(self, make_sf: Any) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/ComposeDeployments/mystack"
            return httpx.Response(200, json=DEPLOYMENT)

        client = DeploymentClient(make_sf(handler))

        assert client.get_deployment("mystack").application_name == "fabric:/mystack"

    def test_get_missing_deployment(self, make_sf: Any) -> None:
        client = DeploymentClient(make_sf(lambda request: httpx.Response(204)))

        with pytest.raises(NotFoundError) as exc_info:
            client.get_deployment("mystack")

        assert exc_info.value.resource_kind == "ComposeDeployment"

    def test_delete_deployment(self, make_sf: Any) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(202)

        DeploymentClient(make_sf(handler)).delete_deployment("mystack")

        assert seen[0].method == "POST"
        assert seen[0].url.path == "/ComposeDeployments/mystack/$/Delete"

    def test_delete_missing_deployment(self, make_sf: Any) -> None:
        client = DeploymentClient(make_sf(lambda request: httpx.Response(404)))

        with pytest.raises(NotFoundError):
            client.delete_deployment("mystack")

    def test_delete_conflict_propagates(self, make_sf: Any) -> None:
        client = DeploymentClient(make_sf(lambda request: httpx.Response(409, text="busy")))

        with pytest.raises(HTTPStatusError) as exc_info:
            client.delete_deployment("mystack")

        assert exc_info.value.status_code == 409
        assert exc_info.value.body == "busy"
