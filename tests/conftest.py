# ABOUTME: Pytest fixtures and configuration for ArgoCD SDK tests
# ABOUTME: Provides shared fixtures for unit and integration tests

import os
from typing import AsyncIterator

import pytest
from pydantic import SecretStr

from argocd_sdk.argocd import ArgocdClient
from argocd_sdk.config import ClientConfig


@pytest.fixture
def config() -> ClientConfig:
    """Create a client configuration for respx-based tests."""
    return ClientConfig(
        url="https://argocd.example.com",
        token=SecretStr("test-token"),
    )


@pytest.fixture
def sample_application() -> dict:
    """Create a sample application manifest for testing."""
    return {
        "metadata": {"name": "test-app", "namespace": "argocd"},
        "spec": {
            "project": "default",
            "source": {
                "repoURL": "https://github.com/example/repo.git",
                "path": "manifests",
                "targetRevision": "HEAD",
            },
            "destination": {
                "server": "https://kubernetes.default.svc",
                "namespace": "default",
            },
        },
    }


# Integration test fixtures


@pytest.fixture
def argocd_url() -> str | None:
    """Get ArgoCD URL from environment."""
    return os.environ.get("ARGOCD_URL")


@pytest.fixture
def argocd_token() -> str | None:
    """Get ArgoCD token from environment."""
    return os.environ.get("ARGOCD_TOKEN")


@pytest.fixture
def argocd_insecure() -> bool:
    """Get ArgoCD insecure setting from environment."""
    return os.environ.get("ARGOCD_INSECURE", "false").lower() == "true"


@pytest.fixture
async def live_argocd_client(
    argocd_url: str | None,
    argocd_token: str | None,
    argocd_insecure: bool,
) -> AsyncIterator[ArgocdClient | None]:
    """Create a live ArgoCD client for integration tests."""
    if not argocd_url or not argocd_token:
        yield None
        return

    config = ClientConfig(
        url=argocd_url,
        token=SecretStr(argocd_token),
        insecure=argocd_insecure,
        timeout=30.0,
    )

    async with ArgocdClient(config) as client:
        yield client
