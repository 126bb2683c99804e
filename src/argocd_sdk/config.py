# ABOUTME: Configuration management for the ArgoCD SDK
# ABOUTME: Holds the immutable client config and environment-driven settings

"""
Configuration management using pydantic-settings.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

This module defines how an SDK client learns WHERE the ArgoCD server lives
and HOW to authenticate against it. It:

1. VALIDATES the base URL and token supplied by the host application
2. FREEZES them into a ClientConfig that never changes for a client's lifetime
3. OPTIONALLY reads them from environment variables via SdkSettings

=============================================================================
TWO CONFIGURATION CLASSES
=============================================================================

1. ClientConfig: Everything one client needs (URL, token, TLS, timeout)
   - A frozen BaseModel, so it can be shared between wrappers safely

2. SdkSettings: Environment-driven loader (ARGOCD_* variables)
   - Purely a convenience; the SDK never reads the environment on its own

=============================================================================
ENVIRONMENT VARIABLE MAPPING
=============================================================================

    ARGOCD_URL            -> Server URL
    ARGOCD_TOKEN          -> API bearer token
    ARGOCD_INSECURE       -> Skip TLS certificate verification
    ARGOCD_TIMEOUT        -> Request timeout in seconds (unset = no timeout)
    ARGOCD_SDK_LOG_LEVEL  -> Log level applied by ArgocdClient.from_settings()
    ARGOCD_SDK_LOG_JSON   -> JSON log lines instead of console output
    ARGOCD_SDK_ENV_FILE   -> Optional .env file to read the above from
"""

from __future__ import annotations

import os
from typing import Annotated

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================


class ClientConfig(BaseModel):
    """
    Connection settings for a single ArgoCD server.

    WHY FROZEN?
    -----------
    Every resource wrapper shares the same request core, and the request core
    builds its headers from this object once. Freezing the model means no
    caller can swap the token or URL out from under in-flight requests:

        config.token = SecretStr("other")  # raises ValidationError

    USAGE EXAMPLE:
    --------------
        config = ClientConfig(
            url="https://argocd.example.com",
            token=SecretStr("my-api-token"),
        )
    """

    model_config = {"extra": "ignore", "frozen": True}

    url: str = Field(description="ArgoCD server URL")
    # Base URL of the server, e.g. "https://argocd.example.com".
    # The request core appends "/api/v1" to it.

    token: SecretStr = Field(description="ArgoCD API token")
    # Sent as "Authorization: Bearer <token>" on every request.
    # SecretStr keeps it out of repr() and log output.

    insecure: bool = Field(default=False, description="Skip TLS verification")
    # Only for self-signed development servers.

    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds, None for no timeout",
    )
    # The SDK imposes no timeout of its own. Callers that want one set it here.

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Ensure URL has a scheme and no trailing slash.

        "argocd.example.com"   -> "https://argocd.example.com"
        "https://example.com/" -> "https://example.com"

        The trailing slash matters because "/api/v1" is appended to it.
        """
        if not v:
            raise ValueError("url must not be empty")
        if not v.startswith(("http://", "https://")):
            v = f"https://{v}"
        return v.rstrip("/")

    @property
    def api_url(self) -> str:
        """Base URL for the v1 REST API."""
        return f"{self.url}/api/v1"


# =============================================================================
# ENVIRONMENT SETTINGS
# =============================================================================


class SdkSettings(BaseSettings):
    """
    SDK settings read from the environment.

    The server connection fields use validation aliases so the same
    ARGOCD_URL / ARGOCD_TOKEN variables the argocd CLI understands work here
    too. SDK-specific settings use the ARGOCD_SDK_ prefix.

    USAGE:
    ------
        settings = load_settings()
        async with ArgocdClient.from_settings(settings) as client:
            ...
    """

    model_config = SettingsConfigDict(
        env_prefix="ARGOCD_SDK_",
        extra="ignore",
        populate_by_name=True,
    )

    argocd_url: str = Field(
        default="",
        validation_alias="ARGOCD_URL",
        description="ArgoCD server URL",
    )

    argocd_token: SecretStr = Field(
        default=SecretStr(""),
        validation_alias="ARGOCD_TOKEN",
        description="ArgoCD API token",
    )
    # HOW TO GET AN ARGOCD TOKEN:
    #    argocd account generate-token --account <account-name>

    argocd_insecure: bool = Field(
        default=False,
        validation_alias="ARGOCD_INSECURE",
        description="Skip TLS verification",
    )

    argocd_timeout: float | None = Field(
        default=None,
        validation_alias="ARGOCD_TIMEOUT",
        description="Request timeout in seconds",
    )

    log_level: Annotated[str, Field(pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")] = Field(
        default="INFO",
        description="Logging level",
    )

    log_json: bool = Field(
        default=False,
        description="Render log events as JSON lines",
    )

    @property
    def client_config(self) -> ClientConfig | None:
        """
        Build a ClientConfig from the environment.

        Returns None if ARGOCD_URL is not set, so callers can tell
        "not configured" apart from "configured badly" (which raises).
        """
        if not self.argocd_url:
            return None
        return ClientConfig(
            url=self.argocd_url,
            token=self.argocd_token,
            insecure=self.argocd_insecure,
            timeout=self.argocd_timeout,
        )


def load_settings() -> SdkSettings:
    """
    Load settings from environment with validation.

    If ARGOCD_SDK_ENV_FILE is set, variables are also read from that file.

    Raises:
        pydantic.ValidationError: If configuration is invalid.
    """
    return SdkSettings(
        _env_file=os.environ.get("ARGOCD_SDK_ENV_FILE"),
    )
