# ABOUTME: Resource wrapper package for the ArgoCD SDK
# ABOUTME: One module per ArgoCD API resource group

"""
ArgoCD resource wrappers.

Each wrapper receives the shared ApiClient at construction and calls its
request() method. Wrappers never depend on each other.

    accounts.py       /api/v1/account
    applications.py   /api/v1/applications
    certificates.py   /api/v1/certificates
    clusters.py       /api/v1/clusters
    gpg_keys.py       /api/v1/gpgkeys
    notifications.py  /api/v1/notifications/*
    projects.py       /api/v1/projects
    repositories.py   /api/v1/repositories
    session.py        /api/v1/session
    settings.py       /api/v1/settings
    users.py          /api/v1/users
    version.py        /api/v1/version
"""

from argocd_sdk.services.accounts import AccountService
from argocd_sdk.services.applications import ApplicationService
from argocd_sdk.services.certificates import CertificateService
from argocd_sdk.services.clusters import ClusterService
from argocd_sdk.services.gpg_keys import GpgKeyService
from argocd_sdk.services.notifications import NotificationService
from argocd_sdk.services.projects import ProjectService
from argocd_sdk.services.repositories import RepositoryService
from argocd_sdk.services.session import SessionService
from argocd_sdk.services.settings import SettingsService
from argocd_sdk.services.users import UserService
from argocd_sdk.services.version import VersionService

__all__ = [
    "AccountService",
    "ApplicationService",
    "CertificateService",
    "ClusterService",
    "GpgKeyService",
    "NotificationService",
    "ProjectService",
    "RepositoryService",
    "SessionService",
    "SettingsService",
    "UserService",
    "VersionService",
]
