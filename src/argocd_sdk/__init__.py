# ABOUTME: ArgoCD SDK package initialization
# ABOUTME: Exposes the client, configuration, errors and version information

"""
ArgoCD SDK - async Python client for the Argo CD REST API.

=============================================================================
WHAT IS ARGO CD?
=============================================================================

ArgoCD is a GitOps continuous delivery tool for Kubernetes. It:

1. WATCHES Git repositories containing Kubernetes manifests
2. COMPARES the desired state (Git) with the actual state (cluster)
3. SYNCHRONIZES the cluster to match Git when differences are found

Everything the argocd CLI and web UI do goes through its REST API under
/api/v1. This package wraps that API.

=============================================================================
PACKAGE STRUCTURE OVERVIEW
=============================================================================

argocd_sdk/
├── __init__.py          <- YOU ARE HERE: Package entry point
├── argocd.py            <- ArgocdClient: one attribute per resource group
├── config.py            <- ClientConfig and environment settings
├── services/            <- One resource wrapper per API resource group
└── utils/
    ├── client.py        <- ApiClient request core, ArgocdError, NetworkError
    ├── logging.py       <- structlog configuration and correlation IDs
    └── urls.py          <- Path segment encoding and query building

Example:
    >>> from argocd_sdk import ArgocdClient, ClientConfig
    >>> config = ClientConfig(url="https://argocd.example.com", token="...")
    >>> async with ArgocdClient(config) as client:
    ...     await client.version.get_version()
"""

from argocd_sdk.argocd import ArgocdClient
from argocd_sdk.config import ClientConfig, SdkSettings, load_settings
from argocd_sdk.utils.client import ApiClient, ArgocdError, NetworkError
from argocd_sdk.utils.logging import (
    configure_logging,
    correlation_scope,
    set_correlation_id,
)

# Semantic Versioning; 0.x means the API may still change.
__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ArgocdClient",
    "ArgocdError",
    "ClientConfig",
    "NetworkError",
    "SdkSettings",
    "__version__",
    "configure_logging",
    "correlation_scope",
    "load_settings",
    "set_correlation_id",
]
