"""Base client for the Service Fabric cluster management API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from servicefabric.auth import AuthConfig, NoAuth, build_http_client
from servicefabric.models.common import AggregateResult, Page
from servicefabric.utils.errors import (
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    NotFoundError,
    PaginationLimitError,
    TransportError,
)

if TYPE_CHECKING:
    from servicefabric.config import ServiceFabricConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ServiceFabricClient:
    """Connection to one Service Fabric cluster.

    Holds the endpoint, the API version and a transport configured for one
    authentication strategy. Every request carries the api-version query
    parameter. The client holds no other state and may be shared between
    threads.

    Usage:
        with ServiceFabricClient("https://cluster:19080", "6.0", auth) as sf:
            apps = ApplicationClient(sf).list_applications()
    """

    def __init__(
        self,
        endpoint: str,
        api_version: str,
        auth: AuthConfig | None = None,
        *,
        timeout: float = 30.0,
        max_pages: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not endpoint:
            raise ConfigurationError("endpoint missing for client configuration")
        if not api_version:
            raise ConfigurationError("api_version is required but not provided")
        if max_pages is not None and max_pages < 1:
            raise ConfigurationError("max_pages must be at least 1")

        self._endpoint = endpoint.rstrip("/")
        self._api_version = api_version
        self._auth = auth or NoAuth()
        self._max_pages = max_pages
        self._http = build_http_client(
            self._endpoint, self._auth, timeout=timeout, transport=transport
        )

    @classmethod
    def from_config(
        cls,
        config: ServiceFabricConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> ServiceFabricClient:
        """Create a client from loaded settings."""
        return cls(
            config.endpoint,
            config.api_version,
            config.to_auth_config(),
            timeout=config.timeout_seconds,
            max_pages=config.max_pages,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def auth(self) -> AuthConfig:
        return self._auth

    def close(self) -> None:
        """Release the underlying transport."""
        self._http.close()

    def __enter__(self) -> ServiceFabricClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Send a request and return the 2xx response.

        Raises:
            TransportError: If the request could not be sent.
            HTTPStatusError: If the cluster answered with a non-2xx status.
        """
        query: dict[str, Any] = {"api-version": self._api_version}
        if params:
            query.update(params)
        url = f"{self._endpoint}{path}"
        logger.debug(f"{method} {path} params={query}")

        try:
            response = self._http.request(
                method,
                path,
                params=query,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__, method, url) from e

        if not response.is_success:
            raise HTTPStatusError(response.status_code, response.text, method, str(response.url))
        return response

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        return self.request("GET", path, params, timeout=timeout)

    def post(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        return self.request("POST", path, params, timeout=timeout)

    def decode(self, response: httpx.Response, model: type[M]) -> M:
        """Decode a JSON response body into a model.

        Raises:
            DecodeError: If the body is not valid JSON for the model.
        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Could not deserialise JSON response: {e}", str(response.url)) from e

    # -------------------------------------------------------------------------
    # Query helpers
    # -------------------------------------------------------------------------

    def fetch_all(
        self,
        path: str,
        page_model: type[Page[T]],
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> AggregateResult[T]:
        """Fetch every page of a listing and concatenate the items.

        Pages are requested one after another, each carrying the previous
        page's continuation token in the ``continue`` parameter, until a page
        arrives without a token. Any failure discards the items gathered so
        far.

        Args:
            path: Resource path relative to the endpoint.
            page_model: Page model used to decode each response.
            params: Extra query parameters sent with every page request.
            timeout: Per-request timeout in seconds.

        Returns:
            AggregateResult holding the items of all pages in server order.

        Raises:
            TransportError, HTTPStatusError, DecodeError: On any page failure.
            PaginationLimitError: If max_pages is set and exceeded.
        """
        items: list[T] = []
        continuation_token = ""
        pages = 0

        while True:
            if self._max_pages is not None and pages >= self._max_pages:
                raise PaginationLimitError(path, self._max_pages)

            query = dict(params or {})
            if continuation_token:
                query["continue"] = continuation_token

            response = self.get(path, query, timeout=timeout)
            page = self.decode(response, page_model)
            pages += 1
            items.extend(page.items)
            logger.debug(f"Fetched page {pages} of {path} ({len(page.items)} items)")

            continuation_token = page.continuation_token or ""
            if not continuation_token:
                break

        return AggregateResult(items=items, pages=pages)

    def fetch_one(
        self,
        path: str,
        model: type[M],
        resource_kind: str,
        name: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> M:
        """Fetch a single resource.

        Raises:
            NotFoundError: If the cluster answers 204 No Content.
        """
        response = self.get(path, params, timeout=timeout)
        if response.status_code == httpx.codes.NO_CONTENT:
            raise NotFoundError(resource_kind, name, response.status_code)
        return self.decode(response, model)

    def delete(
        self,
        path: str,
        resource_kind: str,
        name: str,
        params: dict[str, Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        """POST a delete command for a resource.

        Raises:
            NotFoundError: If the cluster answers 404, i.e. the resource is
                already absent.
        """
        try:
            self.post(path, params, timeout=timeout)
        except HTTPStatusError as e:
            if e.status_code == httpx.codes.NOT_FOUND:
                raise NotFoundError(resource_kind, name, e.status_code) from e
            raise
        logger.debug(f"Deleted {resource_kind} '{name}'")
