"""Authentication and transport configuration for Service Fabric clients.

A client authenticates in exactly one of three ways, fixed when it is
built:

- NoAuth: plain HTTP(S), no client credentials.
- CertAuth: mutual TLS. The cluster certificate is verified against the
  supplied CA bundle only, including hostname verification, and the client
  presents its own certificate/key pair.
- BasicAuthNTLM: HTTP Basic credentials on every request, upgraded to an
  NTLM handshake when the cluster answers with an NTLM challenge.
"""

from __future__ import annotations

import logging
import ssl
from collections.abc import Generator
from typing import Annotated, Literal, Union

import httpx
from httpx_ntlm import HttpNtlmAuth
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from servicefabric.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


class NoAuth(BaseModel):
    """No client authentication."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["none"] = "none"


class CertAuth(BaseModel):
    """Mutual TLS with a client certificate."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["certificate"] = "certificate"
    cert_file: str = Field("", description="Client certificate (PEM)")
    key_file: str = Field("", description="Client private key (PEM)")
    ca_file: str = Field("", description="CA bundle trusted for the cluster certificate")


class BasicAuthNTLM(BaseModel):
    """Basic credentials negotiated through NTLM."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["ntlm"] = "ntlm"
    username: str = Field("", description="Account name, optionally DOMAIN\\user")
    password: SecretStr = Field(SecretStr(""), description="Account password")


AuthConfig = Annotated[Union[NoAuth, CertAuth, BasicAuthNTLM], Field(discriminator="mode")]


class NtlmBasicAuth(httpx.Auth):
    """Send Basic credentials, falling back to an NTLM handshake on challenge.

    Every request first goes out with Basic credentials. When the cluster
    answers 401 with an NTLM or Negotiate challenge, the Basic header is
    dropped and the NTLM negotiate/authenticate exchange runs on the same
    request.
    """

    requires_response_body = True

    def __init__(self, username: str, password: str) -> None:
        self._basic = httpx.BasicAuth(username, password)
        self._ntlm = HttpNtlmAuth(username, password)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        response = yield next(self._basic.auth_flow(request))
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return
        challenge = response.headers.get("WWW-Authenticate", "").lower()
        if "ntlm" not in challenge and "negotiate" not in challenge:
            return

        logger.debug(f"NTLM challenge for {request.url}, starting handshake")
        # The NTLM flow only negotiates on requests without credentials.
        del request.headers["Authorization"]
        ntlm_flow = self._ntlm.auth_flow(request)
        next(ntlm_flow)
        try:
            # Answer the NTLM flow's first request with the challenge already received.
            request = ntlm_flow.send(response)
            while True:
                response = yield request
                request = ntlm_flow.send(response)
        except StopIteration:
            return


def build_ssl_context(auth: CertAuth) -> ssl.SSLContext:
    """Build a TLS context trusting only the configured CA.

    Raises:
        ConfigurationError: If a file is not configured or cannot be loaded.
    """
    if not auth.ca_file:
        raise ConfigurationError("ca_file is required but not provided")
    if not auth.cert_file:
        raise ConfigurationError("cert_file is required but not provided")
    if not auth.key_file:
        raise ConfigurationError("key_file is required but not provided")

    try:
        context = ssl.create_default_context(cafile=auth.ca_file)
    except OSError as e:
        raise ConfigurationError(f"Unable to read CA certificate file: {e}") from e

    try:
        context.load_cert_chain(certfile=auth.cert_file, keyfile=auth.key_file)
    except OSError as e:
        raise ConfigurationError(f"Unable to load X509 key pair: {e}") from e

    return context


def build_ntlm_auth(auth: BasicAuthNTLM) -> NtlmBasicAuth:
    """Build the request authenticator for NTLM-negotiated basic auth.

    Raises:
        ConfigurationError: If the username or password is empty.
    """
    if not auth.username:
        raise ConfigurationError("username is required but not provided")
    password = auth.password.get_secret_value()
    if not password:
        raise ConfigurationError("password is required but not provided")
    return NtlmBasicAuth(auth.username, password)


def build_http_client(
    endpoint: str,
    auth: AuthConfig | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx.Client configured for one authentication strategy.

    Args:
        endpoint: Cluster management endpoint used as the base URL.
        auth: Authentication strategy; NoAuth when omitted.
        timeout: Default request timeout in seconds.
        transport: Transport to send requests through instead of the
            default network transport.

    Returns:
        A ready-to-use httpx.Client.

    Raises:
        ConfigurationError: If the endpoint or credentials are missing or
            the TLS material cannot be loaded.
    """
    if not endpoint:
        raise ConfigurationError("endpoint missing for client configuration")

    auth = auth or NoAuth()
    verify: bool | ssl.SSLContext = True
    request_auth: httpx.Auth | None = None

    if isinstance(auth, CertAuth):
        verify = build_ssl_context(auth)
    elif isinstance(auth, BasicAuthNTLM):
        request_auth = build_ntlm_auth(auth)

    logger.info(f"Configured Service Fabric client for {endpoint} (auth={auth.mode})")
    return httpx.Client(
        base_url=endpoint.rstrip("/"),
        auth=request_auth,
        verify=verify,
        timeout=timeout,
        transport=transport,
    )
