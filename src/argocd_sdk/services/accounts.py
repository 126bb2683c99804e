# ABOUTME: Account resource wrapper for the ArgoCD SDK
# ABOUTME: Accounts, RBAC checks, passwords and API tokens under /api/v1/account

"""ArgoCD account operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import segment

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class AccountService:
    """Local accounts, their tokens, and RBAC permission checks."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_accounts(self) -> Any:
        """
        List local accounts.

        ArgoCD API: GET /api/v1/account
        """
        return await self._api.request("GET", "/account")

    async def can_i(self, resource: str, action: str, subresource: str) -> Any:
        """
        Check whether the current account may perform an action.

        ArgoCD API: GET /api/v1/account/can-i/{resource}/{action}/{subresource}

        Args:
            resource: RBAC resource, e.g. "applications"
            action: RBAC action, e.g. "sync"
            subresource: Object the action targets, e.g. "default/guestbook"

        Returns:
            {"value": "yes"} or {"value": "no"}
        """
        return await self._api.request(
            "GET",
            f"/account/can-i/{segment(resource)}/{segment(action)}/{segment(subresource)}",
        )

    async def update_password(self, request: dict[str, Any]) -> Any:
        """
        Change an account's password.

        ArgoCD API: PUT /api/v1/account/password

        Args:
            request: {"currentPassword": ..., "newPassword": ..., "name": ...}
        """
        return await self._api.request("PUT", "/account/password", json_data=request)

    async def get_account(self, name: str) -> Any:
        """ArgoCD API: GET /api/v1/account/{name}"""
        return await self._api.request("GET", f"/account/{segment(name)}")

    async def create_token(self, name: str, request: dict[str, Any]) -> Any:
        """
        Generate an API token for an account.

        ArgoCD API: POST /api/v1/account/{name}/token

        Args:
            name: Account name
            request: {"expiresIn": seconds, "id": ...}

        Returns:
            {"token": "<jwt>"}
        """
        return await self._api.request(
            "POST",
            f"/account/{segment(name)}/token",
            json_data=request,
        )

    async def delete_token(self, name: str, token_id: str) -> Any:
        """ArgoCD API: DELETE /api/v1/account/{name}/token/{id}"""
        return await self._api.request(
            "DELETE",
            f"/account/{segment(name)}/token/{segment(token_id)}",
        )
