# ABOUTME: Top-level ArgoCD SDK client
# ABOUTME: Owns the shared request core and exposes one attribute per resource group

"""
ArgoCD SDK entry point.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

ArgocdClient is what application code constructs. It builds ONE ApiClient
(the request core) and hands it to every resource wrapper:

    ArgocdClient
    ├── api            -> ApiClient (URL, auth headers, error handling)
    ├── accounts       -> AccountService(api)
    ├── applications   -> ApplicationService(api)
    ├── certificates   -> CertificateService(api)
    ├── clusters       -> ClusterService(api)
    ├── gpg_keys       -> GpgKeyService(api)
    ├── notifications  -> NotificationService(api)
    ├── projects       -> ProjectService(api)
    ├── repositories   -> RepositoryService(api)
    ├── session        -> SessionService(api)
    ├── settings       -> SettingsService(api)
    ├── users          -> UserService(api)
    └── version        -> VersionService(api)

Wrappers hold a reference to the request core instead of inheriting from
it, so request logic lives in exactly one place.

USAGE:
------
    config = ClientConfig(url="https://argocd.example.com", token=SecretStr(token))

    async with ArgocdClient(config) as client:
        apps = await client.applications.list_applications(projects=["default"])
        version = await client.version.get_version()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from argocd_sdk.services import (
    AccountService,
    ApplicationService,
    CertificateService,
    ClusterService,
    GpgKeyService,
    NotificationService,
    ProjectService,
    RepositoryService,
    SessionService,
    SettingsService,
    UserService,
    VersionService,
)
from argocd_sdk.utils.client import ApiClient
from argocd_sdk.utils.logging import configure_from_settings

if TYPE_CHECKING:
    from argocd_sdk.config import ClientConfig, SdkSettings

logger = structlog.get_logger(__name__)


class ArgocdClient:
    """
    Async client for the ArgoCD REST API.

    ALWAYS use the context manager pattern:
        async with ArgocdClient(config) as client:
            ...

    Calling a wrapper method outside the block raises RuntimeError.
    """

    def __init__(self, config: ClientConfig) -> None:
        """
        Build the request core and every resource wrapper.

        Args:
            config: Server URL, token and transport settings. Frozen, so it
                    is shared by all wrappers for the client's lifetime.
        """
        self.api = ApiClient(config)

        self.accounts = AccountService(self.api)
        self.applications = ApplicationService(self.api)
        self.certificates = CertificateService(self.api)
        self.clusters = ClusterService(self.api)
        self.gpg_keys = GpgKeyService(self.api)
        self.notifications = NotificationService(self.api)
        self.projects = ProjectService(self.api)
        self.repositories = RepositoryService(self.api)
        self.session = SessionService(self.api)
        self.settings = SettingsService(self.api)
        self.users = UserService(self.api)
        self.version = VersionService(self.api)

    @classmethod
    def from_settings(
        cls,
        settings: SdkSettings,
        configure_logs: bool = True,
    ) -> ArgocdClient:
        """
        Create a client from environment-driven settings.

        Also applies the logging settings (ARGOCD_SDK_LOG_LEVEL,
        ARGOCD_SDK_LOG_JSON) unless configure_logs is False, for hosts that
        set up structlog themselves.

        Raises:
            ValueError: If ARGOCD_URL is not configured.
        """
        config = settings.client_config
        if config is None:
            raise ValueError("ArgoCD URL not configured. Set ARGOCD_URL.")
        if configure_logs:
            configure_from_settings(settings)
        return cls(config)

    @property
    def config(self) -> ClientConfig:
        return self.api.config

    async def __aenter__(self) -> ArgocdClient:
        await self.api.__aenter__()
        logger.debug("Opened ArgoCD client", url=self.config.url)
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.api.__aexit__(*args)
        logger.debug("Closed ArgoCD client", url=self.config.url)
