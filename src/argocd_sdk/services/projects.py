# ABOUTME: Project resource wrapper for the ArgoCD SDK
# ABOUTME: AppProject CRUD, sync windows and events under /api/v1/projects

"""
ArgoCD project operations.

Projects group applications and restrict what they may do: which
repositories they may deploy from, which clusters and namespaces they may
deploy to, and when syncs are allowed (sync windows).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder, segment

if TYPE_CHECKING:
    from argocd_sdk.utils.client import ApiClient


class ProjectService:
    """Operations on ArgoCD projects (AppProject resources)."""

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_projects(self, name: str | None = None) -> Any:
        """
        List projects.

        ArgoCD API: GET /api/v1/projects
        """
        query = QueryBuilder()
        query.add("name", name)

        return await self._api.request("GET", "/projects", params=query.items())

    async def create_project(self, project: dict[str, Any]) -> Any:
        """
        Create a project.

        ArgoCD API: POST /api/v1/projects

        Args:
            project: {"project": {"metadata": {...}, "spec": {...}}, "upsert": bool}
        """
        return await self._api.request("POST", "/projects", json_data=project)

    async def get_global_projects(self) -> Any:
        """
        List projects whose settings are inherited globally.

        ArgoCD API: GET /api/v1/projects/global
        """
        return await self._api.request("GET", "/projects/global")

    async def get_project(self, name: str) -> Any:
        """ArgoCD API: GET /api/v1/projects/{name}"""
        return await self._api.request("GET", f"/projects/{segment(name)}")

    async def update_project(self, name: str, project: dict[str, Any]) -> Any:
        """ArgoCD API: PUT /api/v1/projects/{name}"""
        return await self._api.request(
            "PUT",
            f"/projects/{segment(name)}",
            json_data=project,
        )

    async def delete_project(self, name: str) -> Any:
        """ArgoCD API: DELETE /api/v1/projects/{name}"""
        return await self._api.request("DELETE", f"/projects/{segment(name)}")

    async def get_detailed_project(self, name: str) -> Any:
        """
        Get a project together with the global projects and scoped
        repositories and clusters that apply to it.

        ArgoCD API: GET /api/v1/projects/{name}/detailed
        """
        return await self._api.request("GET", f"/projects/{segment(name)}/detailed")

    async def get_sync_windows_state(self, name: str) -> Any:
        """
        Get the project's currently active sync windows.

        ArgoCD API: GET /api/v1/projects/{name}/syncwindows
        """
        return await self._api.request("GET", f"/projects/{segment(name)}/syncwindows")

    async def get_project_events(self, name: str) -> Any:
        """ArgoCD API: GET /api/v1/projects/{name}/events"""
        return await self._api.request("GET", f"/projects/{segment(name)}/events")
