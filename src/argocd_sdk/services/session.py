# ABOUTME: Session resource wrapper for the ArgoCD SDK
# ABOUTME: Login, logout and current-user info under /api/v1/session

"""ArgoCD session operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class SessionService:
    """Session tokens and the identity behind the current token."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def create_session(self, session: dict[str, Any]) -> Any:
        """
        Log in and obtain a session token.

        ArgoCD API: POST /api/v1/session

        The returned token is not adopted by this client; its bearer token
        is fixed at construction. Build a new client to use it.

        Args:
            session: {"username": ..., "password": ...}

        Returns:
            {"token": "<jwt>"}
        """
        return await self._api.request("POST", "/session", json_data=session)

    async def delete_session(self) -> Any:
        """ArgoCD API: DELETE /api/v1/session"""
        return await self._api.request("DELETE", "/session")

    async def get_user_info(self) -> Any:
        """
        Describe the account behind the current token.

        ArgoCD API: GET /api/v1/session/userinfo
        """
        return await self._api.request("GET", "/session/userinfo")
