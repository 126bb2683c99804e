# ABOUTME: Repository resource wrapper for the ArgoCD SDK
# ABOUTME: Git and Helm source repositories under /api/v1/repositories

"""
ArgoCD repository operations.

Repositories are addressed by their URL, which is percent-encoded into one
path segment:

    GET /api/v1/repositories/https%3A%2F%2Fgithub.com%2Fargoproj%2Fargocd-example-apps.git
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder, segment

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class RepositoryService:
    """Source repositories ArgoCD can deploy from."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_repositories(
        self,
        repo: str | None = None,
        force_refresh: bool = False,
    ) -> Any:
        """
        List configured repositories.

        ArgoCD API: GET /api/v1/repositories

        Args:
            repo: Filter by repository URL
            force_refresh: Bypass the server's repository cache
        """
        query = QueryBuilder()
        query.add("repo", repo)
        query.add_flag("forceRefresh", force_refresh)

        return await self._api.request("GET", "/repositories", params=query.items())

    async def create_repository(
        self,
        repository: dict[str, Any],
        upsert: bool = False,
        creds_only: bool = False,
    ) -> Any:
        """
        Add a repository.

        ArgoCD API: POST /api/v1/repositories

        Args:
            repository: Repository definition (repo, type, credentials)
            upsert: Replace an existing repository with the same URL
            creds_only: Only update the stored credentials
        """
        query = QueryBuilder()
        query.add_flag("upsert", upsert)
        query.add_flag("credsOnly", creds_only)

        return await self._api.request(
            "POST",
            "/repositories",
            params=query.items(),
            json_data=repository,
        )

    async def get_repository(self, repo: str, force_refresh: bool = False) -> Any:
        """ArgoCD API: GET /api/v1/repositories/{repo}"""
        query = QueryBuilder()
        query.add_flag("forceRefresh", force_refresh)

        return await self._api.request(
            "GET",
            f"/repositories/{segment(repo)}",
            params=query.items(),
        )

    async def update_repository(self, repo: str, repository: dict[str, Any]) -> Any:
        """ArgoCD API: PUT /api/v1/repositories/{repo}"""
        return await self._api.request(
            "PUT",
            f"/repositories/{segment(repo)}",
            json_data=repository,
        )

    async def delete_repository(self, repo: str) -> Any:
        """ArgoCD API: DELETE /api/v1/repositories/{repo}"""
        return await self._api.request("DELETE", f"/repositories/{segment(repo)}")

    async def list_apps(self, repo: str, revision: str | None = None) -> Any:
        """
        List application directories found in a repository.

        ArgoCD API: GET /api/v1/repositories/{repo}/apps
        """
        query = QueryBuilder()
        query.add("revision", revision)

        return await self._api.request(
            "GET",
            f"/repositories/{segment(repo)}/apps",
            params=query.items(),
        )

    async def get_app_details(
        self,
        repo: str,
        path: str,
        revision: str | None = None,
    ) -> Any:
        """
        Describe the application at a path (Helm, Kustomize, plain YAML...).

        ArgoCD API: GET /api/v1/repositories/{repo}/appdetails

        Args:
            repo: Repository URL
            path: Directory within the repository, always sent
            revision: Git revision to inspect
        """
        query = QueryBuilder()
        query.require("path", path)
        query.add("revision", revision)

        return await self._api.request(
            "GET",
            f"/repositories/{segment(repo)}/appdetails",
            params=query.items(),
        )

    async def get_helm_charts(self, repo: str) -> Any:
        """ArgoCD API: GET /api/v1/repositories/{repo}/helmcharts"""
        return await self._api.request("GET", f"/repositories/{segment(repo)}/helmcharts")

    async def list_refs(self, repo: str) -> Any:
        """
        List branches and tags.

        ArgoCD API: GET /api/v1/repositories/{repo}/refs
        """
        return await self._api.request("GET", f"/repositories/{segment(repo)}/refs")
