# ABOUTME: Cluster resource wrapper for the ArgoCD SDK
# ABOUTME: Registered destination clusters under /api/v1/clusters

"""
ArgoCD cluster operations.

Clusters are addressed by their Kubernetes API server URL, for example
"https://kubernetes.default.svc". The URL is percent-encoded into a single
path segment:

    GET /api/v1/clusters/https%3A%2F%2Fkubernetes.default.svc
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder, segment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from argocd_sdk.utils.client import ApiClient


class ClusterService:
    """Kubernetes clusters registered as deployment destinations."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_clusters(
        self,
        server: str | None = None,
        name: str | None = None,
    ) -> Any:
        """
        List registered clusters.

        ArgoCD API: GET /api/v1/clusters

        Args:
            server: Filter by API server URL
            name: Filter by cluster name
        """
        query = QueryBuilder()
        query.add("server", server)
        query.add("name", name)

        return await self._api.request("GET", "/clusters", params=query.items())

    async def create_cluster(self, cluster: dict[str, Any], upsert: bool = False) -> Any:
        """
        Register a cluster.

        ArgoCD API: POST /api/v1/clusters

        Args:
            cluster: Cluster definition (server, name, config)
            upsert: Replace an existing cluster with the same server
        """
        query = QueryBuilder()
        query.add_flag("upsert", upsert)

        return await self._api.request(
            "POST",
            "/clusters",
            params=query.items(),
            json_data=cluster,
        )

    async def get_cluster(self, server: str) -> Any:
        """ArgoCD API: GET /api/v1/clusters/{server}"""
        return await self._api.request("GET", f"/clusters/{segment(server)}")

    async def update_cluster(
        self,
        server: str,
        cluster: dict[str, Any],
        updated_fields: Sequence[str] | None = None,
    ) -> Any:
        """
        Update a registered cluster.

        ArgoCD API: PUT /api/v1/clusters/{server}

        Args:
            server: API server URL of the cluster
            cluster: Updated cluster definition
            updated_fields: Only apply these fields (e.g. ["namespaces"]),
                            sent as repeated "updatedFields" keys
        """
        query = QueryBuilder()
        query.add_all("updatedFields", updated_fields)

        return await self._api.request(
            "PUT",
            f"/clusters/{segment(server)}",
            params=query.items(),
            json_data=cluster,
        )

    async def delete_cluster(self, server: str, name: str | None = None) -> Any:
        """
        Remove a cluster registration.

        ArgoCD API: DELETE /api/v1/clusters/{server}
        """
        query = QueryBuilder()
        query.add("name", name)

        return await self._api.request(
            "DELETE",
            f"/clusters/{segment(server)}",
            params=query.items(),
        )

    async def rotate_auth(self, server: str) -> Any:
        """
        Rotate the bearer token ArgoCD uses for this cluster.

        ArgoCD API: POST /api/v1/clusters/{server}/rotate-auth
        """
        return await self._api.request("POST", f"/clusters/{segment(server)}/rotate-auth")

    async def invalidate_cache(self, server: str) -> Any:
        """
        Drop ArgoCD's cached view of the cluster's resources.

        ArgoCD API: POST /api/v1/clusters/{server}/invalidate-cache
        """
        return await self._api.request(
            "POST",
            f"/clusters/{segment(server)}/invalidate-cache",
        )
