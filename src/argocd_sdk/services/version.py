# ABOUTME: Version wrapper for the ArgoCD SDK
# ABOUTME: Server build information under /api/v1/version

"""ArgoCD server version."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class VersionService:
    """Build and version information of the ArgoCD server."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get_version(self) -> Any:
        """
        Get the server's version and build details.

        ArgoCD API: GET /api/v1/version

        Returns:
            {"Version": "v2.x.y+...", "BuildDate": ..., "GitCommit": ..., ...}
        """
        return await self._api.request("GET", "/version")
