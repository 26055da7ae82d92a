"""Tests for PropertyClient."""

from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from servicefabric.domains.properties.client import PropertyClient
from servicefabric.domains.properties.models import PropertyPage
from servicefabric.utils.errors import HTTPStatusError


@pytest.fixture
def properties_page() -> dict[str, Any]:
    return {
        "ContinuationToken": "",
        "IsConsistent": True,
        "Properties": [
            {
                "Name": "Config",
                "Value": {"Kind": "String", "Data": "enabled"},
                "Metadata": {
                    "TypeId": "String",
                    "CustomTypeId": "",
                    "Parent": "fabric:/samples/apps",
                    "SizeInBytes": 14,
                    "LastModifiedUtcTimestamp": "2017-07-20T00:00:00.000Z",
                    "SequenceNumber": "10",
                },
            },
            {
                "Name": "Count",
                "Value": {"Kind": "Int64", "Data": "42"},
                "Metadata": {"TypeId": "Int64", "Parent": "fabric:/samples/apps"},
            },
        ],
    }


class TestPropertyClient:
    """Test PropertyClient operations."""

    def test_list_properties_passes_include_values(self) -> None:
        mock_sf = MagicMock()
        client = PropertyClient(mock_sf)

        client.list_properties("fabric:/samples/apps", include_values=False)

        mock_sf.fetch_all.assert_called_once_with(
            "/Names/samples~apps/$/GetProperties",
            PropertyPage,
            {"IncludeValues": "false"},
            timeout=None,
        )

    def test_list_properties(self, make_sf: Any, properties_page: dict[str, Any]) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=properties_page)

        client = PropertyClient(make_sf(handler))

        properties = client.list_properties("fabric:/samples/apps")

        assert [p.name for p in properties] == ["Config", "Count"]
        assert properties[0].value is not None
        assert properties[0].value.kind == "String"
        assert properties[0].metadata.size_in_bytes == 14
        assert seen[0].url.params["IncludeValues"] == "true"

    def test_get_property_values(self, make_sf: Any, properties_page: dict[str, Any]) -> None:
        client = PropertyClient(make_sf(lambda request: httpx.Response(200, json=properties_page)))

        assert client.get_property_values("samples/apps") == {
            "Config": "enabled",
            "Count": "42",
        }

    def test_properties_without_values(self, make_sf: Any) -> None:
        page = {"ContinuationToken": "", "Properties": [{"Name": "Config"}]}
        client = PropertyClient(make_sf(lambda request: httpx.Response(200, json=page)))

        assert client.get_property_values("samples/apps") == {"Config": None}

    def test_non_existent_name(self, make_sf: Any) -> None:
        client = PropertyClient(make_sf(lambda request: httpx.Response(404)))

        with pytest.raises(HTTPStatusError):
            client.list_properties("fabric:/missing")
