# ABOUTME: GPG key resource wrapper for the ArgoCD SDK
# ABOUTME: Public keys used for commit signature verification under /api/v1/gpgkeys

"""ArgoCD GPG public key operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder, segment

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class GpgKeyService:
    """GPG public keys the server uses to verify signed commits."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_gpg_keys(self, key_id: str | None = None) -> Any:
        """
        List configured GPG public keys.

        ArgoCD API: GET /api/v1/gpgkeys

        Args:
            key_id: Only return the key with this ID (sent as "keyID")
        """
        query = QueryBuilder()
        query.add("keyID", key_id)

        return await self._api.request("GET", "/gpgkeys", params=query.items())

    async def create_gpg_key(self, key: dict[str, Any]) -> Any:
        """
        Add one or more GPG public keys.

        ArgoCD API: POST /api/v1/gpgkeys

        Args:
            key: {"keyData": "-----BEGIN PGP PUBLIC KEY BLOCK-----..."}
        """
        return await self._api.request("POST", "/gpgkeys", json_data=key)

    async def get_gpg_key(self, key_id: str) -> Any:
        """ArgoCD API: GET /api/v1/gpgkeys/{keyID}"""
        return await self._api.request("GET", f"/gpgkeys/{segment(key_id)}")

    async def delete_gpg_key(self, key_id: str) -> Any:
        """ArgoCD API: DELETE /api/v1/gpgkeys/{keyID}"""
        return await self._api.request("DELETE", f"/gpgkeys/{segment(key_id)}")
