# ABOUTME: Unit tests for cluster and repository resource wrappers
# ABOUTME: Tests URL-valued identifiers are percent-encoded into one path segment

import json

import httpx
import pytest
import respx

from argocd_sdk.argocd import ArgocdClient
from argocd_sdk.config import ClientConfig

BASE_URL = "https://argocd.example.com/api/v1"

CLUSTER_SERVER = "https://kubernetes.default.svc"
ENCODED_SERVER = b"https%3A%2F%2Fkubernetes.default.svc"

REPO_URL = "https://github.com/argoproj/argocd-example-apps.git"
ENCODED_REPO = b"https%3A%2F%2Fgithub.com%2Fargoproj%2Fargocd-example-apps.git"


def _path_route(method: str, prefix: str, body: object = None) -> respx.Route:
    """Route any request whose path starts with the given prefix."""
    return respx.route(
        method=method,
        host="argocd.example.com",
        path__startswith=prefix,
    ).mock(return_value=httpx.Response(200, json=body if body is not None else {}))


def _raw_path(route: respx.Route) -> bytes:
    """Path portion of the last request, without the query string."""
    return route.calls.last.request.url.raw_path.split(b"?")[0]


@pytest.mark.unit
class TestClusterService:
    """Tests for ClusterService."""

    @respx.mock
    async def test_list_clusters_filters(self, config: ClientConfig):
        """Test server and name filters."""
        route = respx.get(f"{BASE_URL}/clusters").mock(
            return_value=httpx.Response(200, json={"items": []})
        )

        async with ArgocdClient(config) as client:
            result = await client.clusters.list_clusters(server=CLUSTER_SERVER, name="in-cluster")

        assert result == {"items": []}
        assert route.calls.last.request.url.params.multi_items() == [
            ("server", CLUSTER_SERVER),
            ("name", "in-cluster"),
        ]

    @respx.mock
    async def test_create_cluster_upsert(self, config: ClientConfig):
        """Test upsert flag and cluster body."""
        route = respx.post(f"{BASE_URL}/clusters").mock(return_value=httpx.Response(200, json={}))
        cluster = {"server": "https://10.0.0.1:6443", "name": "staging", "config": {}}

        async with ArgocdClient(config) as client:
            await client.clusters.create_cluster(cluster, upsert=True)

        request = route.calls.last.request
        assert request.url.params.multi_items() == [("upsert", "true")]
        assert json.loads(request.content) == cluster

    @respx.mock
    async def test_get_cluster_encodes_server(self, config: ClientConfig):
        """Test the server URL becomes a single encoded segment."""
        route = _path_route("GET", "/api/v1/clusters/", {"server": CLUSTER_SERVER})

        async with ArgocdClient(config) as client:
            result = await client.clusters.get_cluster(CLUSTER_SERVER)

        assert result == {"server": CLUSTER_SERVER}
        assert route.calls.last.request.url.raw_path == b"/api/v1/clusters/" + ENCODED_SERVER

    @respx.mock
    async def test_update_cluster_updated_fields(self, config: ClientConfig):
        """Test updatedFields is sent as repeated keys."""
        route = _path_route("PUT", "/api/v1/clusters/")
        cluster = {"server": CLUSTER_SERVER, "namespaces": ["a", "b"]}

        async with ArgocdClient(config) as client:
            await client.clusters.update_cluster(
                CLUSTER_SERVER, cluster, updated_fields=["namespaces", "labels"]
            )

        request = route.calls.last.request
        assert _raw_path(route) == b"/api/v1/clusters/" + ENCODED_SERVER
        assert request.url.params.multi_items() == [
            ("updatedFields", "namespaces"),
            ("updatedFields", "labels"),
        ]
        assert json.loads(request.content) == cluster

    @respx.mock
    async def test_delete_cluster(self, config: ClientConfig):
        """Test delete with optional name."""
        route = _path_route("DELETE", "/api/v1/clusters/")

        async with ArgocdClient(config) as client:
            await client.clusters.delete_cluster(CLUSTER_SERVER, name="in-cluster")

        assert _raw_path(route) == b"/api/v1/clusters/" + ENCODED_SERVER
        assert route.calls.last.request.url.params.multi_items() == [("name", "in-cluster")]

    @respx.mock
    async def test_rotate_auth(self, config: ClientConfig):
        """Test rotate-auth sub-path follows the encoded server."""
        route = _path_route("POST", "/api/v1/clusters/")

        async with ArgocdClient(config) as client:
            await client.clusters.rotate_auth(CLUSTER_SERVER)

        assert route.calls.last.request.url.raw_path == (
            b"/api/v1/clusters/" + ENCODED_SERVER + b"/rotate-auth"
        )

    @respx.mock
    async def test_invalidate_cache(self, config: ClientConfig):
        """Test invalidate-cache sub-path."""
        route = _path_route("POST", "/api/v1/clusters/")

        async with ArgocdClient(config) as client:
            await client.clusters.invalidate_cache(CLUSTER_SERVER)

        assert route.calls.last.request.url.raw_path == (
            b"/api/v1/clusters/" + ENCODED_SERVER + b"/invalidate-cache"
        )


@pytest.mark.unit
class TestRepositoryService:
    """Tests for RepositoryService."""

    @respx.mock
    async def test_list_repositories(self, config: ClientConfig):
        """Test repo filter and forceRefresh flag."""
        route = respx.get(f"{BASE_URL}/repositories").mock(
            return_value=httpx.Response(200, json={"items": []})
        )

        async with ArgocdClient(config) as client:
            await client.repositories.list_repositories(repo=REPO_URL, force_refresh=True)

        assert route.calls.last.request.url.params.multi_items() == [
            ("repo", REPO_URL),
            ("forceRefresh", "true"),
        ]

    @respx.mock
    async def test_list_repositories_no_filters(self, config: ClientConfig):
        """Test unset filters send no query string."""
        route = respx.get(f"{BASE_URL}/repositories").mock(
            return_value=httpx.Response(200, json={"items": []})
        )

        async with ArgocdClient(config) as client:
            await client.repositories.list_repositories()

        assert route.calls.last.request.url.query == b""

    @respx.mock
    async def test_create_repository_flags(self, config: ClientConfig):
        """Test upsert and credsOnly flags with the body."""
        route = respx.post(f"{BASE_URL}/repositories").mock(
            return_value=httpx.Response(200, json={})
        )
        repository = {"repo": REPO_URL, "type": "git"}

        async with ArgocdClient(config) as client:
            await client.repositories.create_repository(repository, upsert=True, creds_only=True)

        request = route.calls.last.request
        assert request.url.params.multi_items() == [("upsert", "true"), ("credsOnly", "true")]
        assert json.loads(request.content) == repository

    @respx.mock
    async def test_get_repository_encodes_url(self, config: ClientConfig):
        """Test the repository URL becomes one encoded segment."""
        route = _path_route("GET", "/api/v1/repositories/", {"repo": REPO_URL})

        async with ArgocdClient(config) as client:
            result = await client.repositories.get_repository(REPO_URL)

        assert result == {"repo": REPO_URL}
        assert route.calls.last.request.url.raw_path == b"/api/v1/repositories/" + ENCODED_REPO

    @respx.mock
    async def test_update_and_delete_repository(self, config: ClientConfig):
        """Test PUT and DELETE use the encoded URL."""
        put_route = _path_route("PUT", "/api/v1/repositories/")
        delete_route = _path_route("DELETE", "/api/v1/repositories/")

        async with ArgocdClient(config) as client:
            await client.repositories.update_repository(REPO_URL, {"repo": REPO_URL})
            await client.repositories.delete_repository(REPO_URL)

        assert put_route.calls.last.request.url.raw_path == b"/api/v1/repositories/" + ENCODED_REPO
        assert json.loads(put_route.calls.last.request.content) == {"repo": REPO_URL}
        assert delete_route.calls.last.request.url.raw_path == (
            b"/api/v1/repositories/" + ENCODED_REPO
        )

    @respx.mock
    async def test_app_details_requires_path(self, config: ClientConfig):
        """Test path is always sent before the optional revision."""
        route = _path_route("GET", "/api/v1/repositories/")

        async with ArgocdClient(config) as client:
            await client.repositories.get_app_details(REPO_URL, "guestbook", revision="main")

        assert _raw_path(route) == b"/api/v1/repositories/" + ENCODED_REPO + b"/appdetails"
        assert route.calls.last.request.url.params.multi_items() == [
            ("path", "guestbook"),
            ("revision", "main"),
        ]

    @respx.mock
    async def test_list_apps(self, config: ClientConfig):
        """Test apps sub-path with revision."""
        route = _path_route("GET", "/api/v1/repositories/", {"items": []})

        async with ArgocdClient(config) as client:
            await client.repositories.list_apps(REPO_URL, revision="HEAD")

        assert _raw_path(route) == b"/api/v1/repositories/" + ENCODED_REPO + b"/apps"
        assert route.calls.last.request.url.params.multi_items() == [("revision", "HEAD")]

    @respx.mock
    async def test_helm_charts_and_refs(self, config: ClientConfig):
        """Test helmcharts and refs sub-paths."""
        route = _path_route("GET", "/api/v1/repositories/")

        async with ArgocdClient(config) as client:
            await client.repositories.get_helm_charts(REPO_URL)
            await client.repositories.list_refs(REPO_URL)

        paths = [call.request.url.raw_path for call in route.calls]
        assert paths == [
            b"/api/v1/repositories/" + ENCODED_REPO + b"/helmcharts",
            b"/api/v1/repositories/" + ENCODED_REPO + b"/refs",
        ]
