# ABOUTME: User resource wrapper for the ArgoCD SDK
# ABOUTME: User CRUD under /api/v1/users

"""ArgoCD user operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import segment

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class UserService:
    """Users managed through the ArgoCD user API."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_users(self) -> Any:
        """ArgoCD API: GET /api/v1/users"""
        return await self._api.request("GET", "/users")

    async def get_user(self, name: str) -> Any:
        """ArgoCD API: GET /api/v1/users/{name}"""
        return await self._api.request("GET", f"/users/{segment(name)}")

    async def create_user(self, user: dict[str, Any]) -> Any:
        """ArgoCD API: POST /api/v1/users"""
        return await self._api.request("POST", "/users", json_data=user)

    async def update_user(self, name: str, user: dict[str, Any]) -> Any:
        """ArgoCD API: PUT /api/v1/users/{name}"""
        return await self._api.request("PUT", f"/users/{segment(name)}", json_data=user)

    async def delete_user(self, name: str) -> Any:
        """ArgoCD API: DELETE /api/v1/users/{name}"""
        return await self._api.request("DELETE", f"/users/{segment(name)}")
