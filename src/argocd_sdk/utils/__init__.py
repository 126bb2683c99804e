# ABOUTME: Utilities package initialization for the ArgoCD SDK
# ABOUTME: Contains the request core, logging setup and URL helpers

"""
ArgoCD SDK Utilities Package

Shared utilities:
    - client.py: ApiClient request core and the two error types
    - logging.py: Structured logging with correlation IDs
    - urls.py: Path segment encoding and query string building
"""
