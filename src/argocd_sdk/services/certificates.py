# ABOUTME: Repository certificate wrapper for the ArgoCD SDK
# ABOUTME: TLS and SSH known-host certificates under /api/v1/certificates

"""
ArgoCD repository certificate operations.

ArgoCD keeps a store of TLS certificates and SSH known-host keys it trusts
when talking to Git repositories. Certificates are identified by three
values, which the delete endpoint needs all of:

    hostNamePattern  - file-glob pattern (not regex) matched against the host
    certType         - "https" or "ssh"
    certSubType      - e.g. "ssh-rsa", "ssh-ed25519", "ecdsa-sha2-nistp256"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class CertificateService:
    """Repository certificates trusted by the ArgoCD server."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_certificates(
        self,
        host_name_pattern: str | None = None,
        cert_type: str | None = None,
        cert_sub_type: str | None = None,
    ) -> Any:
        """
        List repository certificates, optionally filtered.

        ArgoCD API: GET /api/v1/certificates
        """
        query = QueryBuilder()
        query.add("hostNamePattern", host_name_pattern)
        query.add("certType", cert_type)
        query.add("certSubType", cert_sub_type)

        return await self._api.request("GET", "/certificates", params=query.items())

    async def create_certificate(self, certificate: dict[str, Any]) -> Any:
        """
        Add one or more certificates.

        ArgoCD API: POST /api/v1/certificates

        Args:
            certificate: {"items": [{"serverName": ..., "certType": ..., "certData": ...}]}
        """
        return await self._api.request("POST", "/certificates", json_data=certificate)

    async def delete_certificate(
        self,
        host_name_pattern: str,
        cert_type: str,
        cert_sub_type: str,
    ) -> Any:
        """
        Delete matching certificates.

        ArgoCD API: DELETE /api/v1/certificates

        All three values are always sent, even when empty, because the
        server uses them together to select what to delete.
        """
        query = QueryBuilder()
        query.require("hostNamePattern", host_name_pattern)
        query.require("certType", cert_type)
        query.require("certSubType", cert_sub_type)

        return await self._api.request("DELETE", "/certificates", params=query.items())
