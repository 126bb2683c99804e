# ABOUTME: Server settings wrapper for the ArgoCD SDK
# ABOUTME: Read-only server configuration under /api/v1/settings

"""ArgoCD server settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class SettingsService:
    """Server-wide settings visible to clients (URL, SSO, UI options)."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get_settings(self) -> Any:
        """
        Get ArgoCD server settings.

        ArgoCD API: GET /api/v1/settings

        Returns:
            Server settings including URL, OIDC/Dex config, resource
            overrides and enabled UI features.
        """
        return await self._api.request("GET", "/settings")
