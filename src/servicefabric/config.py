"""Configuration for the Service Fabric client."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from servicefabric.auth import AuthConfig

DEFAULT_API_VERSION = "3.0.0"


class AuthMode(str, Enum):
    """How the client authenticates to the cluster."""

    NONE = "none"
    CERTIFICATE = "certificate"
    NTLM = "ntlm"


class ServiceFabricConfig(BaseSettings):
    """Connection settings for a Service Fabric cluster.

    Loaded from environment variables with the SF_ prefix or from a .env
    file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default="",
        description="Cluster management endpoint, e.g. https://cluster:19080",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="Value of the api-version query parameter",
    )

    auth_mode: AuthMode = Field(
        default=AuthMode.NONE,
        description="Authentication strategy",
    )
    cert_file: Path | None = Field(
        default=None,
        description="Client certificate (PEM) for certificate auth",
    )
    key_file: Path | None = Field(
        default=None,
        description="Client private key (PEM) for certificate auth",
    )
    ca_file: Path | None = Field(
        default=None,
        description="CA bundle (PEM) trusted for the cluster certificate",
    )
    username: str = Field(
        default="",
        description="Username for NTLM auth",
    )
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Password for NTLM auth",
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Default per-request timeout",
    )
    max_pages: int | None = Field(
        default=None,
        description="Upper bound on pages fetched per listing (unbounded when unset)",
    )

    def to_auth_config(self) -> AuthConfig:
        """Build the AuthConfig variant selected by auth_mode."""
        from servicefabric.auth import BasicAuthNTLM, CertAuth, NoAuth

        if self.auth_mode == AuthMode.CERTIFICATE:
            return CertAuth(
                cert_file=str(self.cert_file or ""),
                key_file=str(self.key_file or ""),
                ca_file=str(self.ca_file or ""),
            )
        if self.auth_mode == AuthMode.NTLM:
            return BasicAuthNTLM(username=self.username, password=self.password)
        return NoAuth()
