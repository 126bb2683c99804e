# ABOUTME: Notification catalog wrapper for the ArgoCD SDK
# ABOUTME: Read-only listing of notification services, templates and triggers

"""ArgoCD notification catalog (read-only)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class NotificationService:
    """Notification services, templates and triggers configured on the server."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_services(self) -> Any:
        """ArgoCD API: GET /api/v1/notifications/services"""
        return await self._api.request("GET", "/notifications/services")

    async def list_templates(self) -> Any:
        """ArgoCD API: GET /api/v1/notifications/templates"""
        return await self._api.request("GET", "/notifications/templates")

    async def list_triggers(self) -> Any:
        """ArgoCD API: GET /api/v1/notifications/triggers"""
        return await self._api.request("GET", "/notifications/triggers")
