# ABOUTME: Application resource wrapper for the ArgoCD SDK
# ABOUTME: CRUD, sync, manifests, events and resource actions under /api/v1/applications

"""
ArgoCD Application operations.

=============================================================================
WHAT IS AN ARGOCD APPLICATION?
=============================================================================

An Application ties a Git source (repo, path, revision) to a destination
(cluster, namespace). ArgoCD keeps comparing the two and reports whether the
cluster is Synced or OutOfSync with Git, and whether the deployed resources
are Healthy.

=============================================================================
ENDPOINTS
=============================================================================

    GET    /applications                              list_applications
    GET    /applications/{name}                       get_application
    POST   /applications                              create_application
    PUT    /applications/{name}                       update_application
    DELETE /applications/{name}                       delete_application
    POST   /applications/{name}/sync                  sync_application
    GET    /applications/{name}/manifests             get_application_manifests
    GET    /applications/{name}/resource              get_application_resource
    GET    /applications/{name}/events                list_application_events
    GET    /applications/{name}/resource/actions      list_application_resource_actions
    POST   /applications/{name}/resource/actions      run_application_resource_action

Every method returns the server's JSON unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from argocd_sdk.utils.urls import QueryBuilder, segment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from argocd_sdk.utils.client import ApiClient


def _resource_query(
    namespace: str,
    resource_name: str,
    version: str,
    kind: str,
) -> QueryBuilder:
    """Identify one Kubernetes resource managed by an application."""
    query = QueryBuilder()
    query.require("namespace", namespace)
    query.require("resourceName", resource_name)
    query.require("version", version)
    query.require("kind", kind)
    return query


class ApplicationService:
    """
    Operations on ArgoCD applications.

    USAGE:
    ------
        async with ArgocdClient(config) as client:
            apps = await client.applications.list_applications(projects=["default"])
            await client.applications.sync_application("guestbook", dry_run=True)
    """

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    # =========================================================================
    # CRUD
    # =========================================================================

    async def list_applications(
        self,
        name: str | None = None,
        refresh: str | None = None,
        projects: Sequence[str] | None = None,
    ) -> Any:
        """
        List applications.

        ArgoCD API: GET /api/v1/applications

        Args:
            name: Only return the application with this name
            refresh: "normal" or "hard" to force reconciliation first
            projects: Only return applications in these projects.
                      Sent as repeated keys: ?projects=a&projects=b

        Returns:
            {"items": [...], "metadata": {...}}
        """
        query = QueryBuilder()
        query.add("name", name)
        query.add("refresh", refresh)
        query.add_all("projects", projects)

        return await self._api.request("GET", "/applications", params=query.items())

    async def get_application(
        self,
        name: str,
        refresh: str | None = None,
        project: str | None = None,
    ) -> Any:
        """
        Get application by name.

        ArgoCD API: GET /api/v1/applications/{name}

        Args:
            name: Application name
            refresh: "normal" or "hard" to force reconciliation first
            project: Project the application must belong to

        Raises:
            ArgocdError: If application not found (404)
        """
        query = QueryBuilder()
        query.add("refresh", refresh)
        query.add("project", project)

        return await self._api.request(
            "GET",
            f"/applications/{segment(name)}",
            params=query.items(),
        )

    async def create_application(
        self,
        application: dict[str, Any],
        upsert: bool = False,
        validate: bool = True,
    ) -> Any:
        """
        Create an application.

        ArgoCD API: POST /api/v1/applications

        VALIDATE IS SENT ONLY WHEN FALSE:
        ---------------------------------
        The server validates the spec (repo reachable, project allows the
        destination, ...) unless told otherwise, so only validate=False
        needs to be on the wire:

            create_application(app, upsert=True, validate=False)
            -> POST /api/v1/applications?upsert=true&validate=false

        Args:
            application: Application manifest (metadata, spec)
            upsert: Replace an existing application with the same name
            validate: Let the server validate the spec

        Returns:
            The created application
        """
        query = QueryBuilder()
        query.add_flag("upsert", upsert)
        if not validate:
            query.require("validate", False)

        return await self._api.request(
            "POST",
            "/applications",
            params=query.items(),
            json_data=application,
        )

    async def update_application(
        self,
        name: str,
        application: dict[str, Any],
        validate: bool = True,
    ) -> Any:
        """
        Replace an application's manifest.

        ArgoCD API: PUT /api/v1/applications/{name}

        Args:
            name: Application name
            application: Full updated manifest
            validate: Let the server validate the spec
        """
        query = QueryBuilder()
        if not validate:
            query.require("validate", False)

        return await self._api.request(
            "PUT",
            f"/applications/{segment(name)}",
            params=query.items(),
            json_data=application,
        )

    async def delete_application(
        self,
        name: str,
        cascade: bool | None = None,
        propagation_policy: str | None = None,
    ) -> Any:
        """
        Delete application.

        DESTRUCTIVE OPERATION - removes the ArgoCD application.

        ArgoCD API: DELETE /api/v1/applications/{name}

        CASCADE EXPLAINED:
        ------------------
        The server cascades by default, deleting every Kubernetes resource
        the application manages. cascade is therefore three-valued:

            None  -> no parameter, server default (cascade)
            True  -> cascade=true
            False -> cascade=false, resources are left in the cluster

        Args:
            name: Application name
            cascade: Delete managed resources as well
            propagation_policy: "foreground", "background" or "orphan"
        """
        query = QueryBuilder()
        query.add("cascade", cascade)
        query.add("propagationPolicy", propagation_policy)

        return await self._api.request(
            "DELETE",
            f"/applications/{segment(name)}",
            params=query.items(),
        )

    # =========================================================================
    # SYNC AND MANIFESTS
    # =========================================================================

    async def sync_application(
        self,
        name: str,
        dry_run: bool = False,
        prune: bool = False,
        strategy: str | None = None,
        resources: Sequence[str] | None = None,
    ) -> Any:
        """
        Sync an application to its target state.

        ArgoCD API: POST /api/v1/applications/{name}/sync

        Args:
            name: Application name
            dry_run: Preview the sync without applying it
            prune: Delete resources that are no longer in Git
            strategy: Sync strategy ("apply" or "hook")
            resources: Restrict the sync to these resources,
                       sent as repeated "resources" keys
        """
        query = QueryBuilder()
        query.add_flag("dryRun", dry_run)
        query.add_flag("prune", prune)
        query.add("strategy", strategy)
        query.add_all("resources", resources)

        return await self._api.request(
            "POST",
            f"/applications/{segment(name)}/sync",
            params=query.items(),
        )

    async def get_application_manifests(
        self,
        name: str,
        revision: str | None = None,
    ) -> Any:
        """
        Get rendered manifests for an application.

        ArgoCD API: GET /api/v1/applications/{name}/manifests

        Args:
            name: Application name
            revision: Git revision to render (defaults to targetRevision)
        """
        query = QueryBuilder()
        query.add("revision", revision)

        return await self._api.request(
            "GET",
            f"/applications/{segment(name)}/manifests",
            params=query.items(),
        )

    # =========================================================================
    # MANAGED RESOURCES
    # =========================================================================

    async def get_application_resource(
        self,
        name: str,
        *,
        namespace: str,
        resource_name: str,
        version: str,
        kind: str,
        group: str | None = None,
    ) -> Any:
        """
        Get one live resource managed by an application.

        ArgoCD API: GET /api/v1/applications/{name}/resource

        namespace, resourceName, version and kind are always sent; group is
        omitted for core resources (Pod, Service, ...).
        """
        query = _resource_query(namespace, resource_name, version, kind)
        query.add("group", group)

        return await self._api.request(
            "GET",
            f"/applications/{segment(name)}/resource",
            params=query.items(),
        )

    async def list_application_events(
        self,
        name: str,
        resource_namespace: str | None = None,
        resource_name: str | None = None,
        resource_uid: str | None = None,
    ) -> Any:
        """
        List Kubernetes events for an application or one of its resources.

        ArgoCD API: GET /api/v1/applications/{name}/events

        Args:
            name: Application name
            resource_namespace: Filter by resource namespace
            resource_name: Filter by resource name
            resource_uid: Filter by resource UID
        """
        query = QueryBuilder()
        query.add("resourceNamespace", resource_namespace)
        query.add("resourceName", resource_name)
        query.add("resourceUID", resource_uid)

        return await self._api.request(
            "GET",
            f"/applications/{segment(name)}/events",
            params=query.items(),
        )

    async def list_application_resource_actions(
        self,
        name: str,
        *,
        namespace: str,
        resource_name: str,
        version: str,
        kind: str,
        group: str | None = None,
    ) -> Any:
        """
        List the actions available on a managed resource (restart, resume, ...).

        ArgoCD API: GET /api/v1/applications/{name}/resource/actions
        """
        query = _resource_query(namespace, resource_name, version, kind)
        query.add("group", group)

        return await self._api.request(
            "GET",
            f"/applications/{segment(name)}/resource/actions",
            params=query.items(),
        )

    async def run_application_resource_action(
        self,
        name: str,
        *,
        namespace: str,
        resource_name: str,
        version: str,
        kind: str,
        action: str,
        group: str | None = None,
    ) -> Any:
        """
        Run an action on a managed resource.

        ArgoCD API: POST /api/v1/applications/{name}/resource/actions

        Example:
            await client.applications.run_application_resource_action(
                "guestbook",
                namespace="default",
                resource_name="guestbook-ui",
                version="v1",
                kind="Deployment",
                group="apps",
                action="restart",
            )
        """
        query = _resource_query(namespace, resource_name, version, kind)
        query.require("action", action)
        query.add("group", group)

        return await self._api.request(
            "POST",
            f"/applications/{segment(name)}/resource/actions",
            params=query.items(),
        )
