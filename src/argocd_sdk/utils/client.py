# ABOUTME: Shared request core for every ArgoCD resource wrapper
# ABOUTME: Sends authenticated JSON requests and normalizes success and failure

"""
ArgoCD request core with structured error handling.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

Every resource wrapper in argocd_sdk.services funnels its HTTP calls through
ApiClient.request(). It handles:

1. HTTP COMMUNICATION: Resolving paths against <url>/api/v1
2. AUTHENTICATION: Attaching the Bearer token to every request
3. SERIALIZATION: Encoding request bodies and decoding responses as JSON
4. ERROR HANDLING: Turning failures into ArgocdError or NetworkError

It deliberately does NOT retry, cache or post-process anything. A response
body comes back exactly as the server sent it, and every failure reaches the
caller.

=============================================================================
ARGOCD REST API OVERVIEW
=============================================================================

    GET    /api/v1/applications              - List applications
    POST   /api/v1/applications?upsert=true  - Create or update one
    DELETE /api/v1/applications/{name}       - Delete one

Authentication is via Bearer token in the Authorization header:
    Authorization: Bearer <token>

Errors carry a JSON body like:
    {"message": "error description", "error": "additional details"}

=============================================================================
TWO KINDS OF FAILURE
=============================================================================

ArgocdError:  the server answered, but with a non-2xx status.
              Carries the status code and the server's message.

NetworkError: there was no usable answer at all. DNS failure, refused
              connection, timeout, or a 2xx body that is not JSON.

Keeping them apart lets callers decide what to do: a 404 is a fact about
the resource, a connection reset is a fact about the network.

=============================================================================
CONTEXT MANAGERS (async with)
=============================================================================

    async with ApiClient(config) as api:
        apps = await api.request("GET", "/applications")

__aenter__ opens the httpx.AsyncClient, __aexit__ closes it, even when the
body raises.
"""

# =============================================================================
# IMPORTS
# =============================================================================

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import httpx
import structlog

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from argocd_sdk.config import ClientConfig

logger = structlog.get_logger(__name__)

SUPPORTED_METHODS = frozenset(["GET", "POST", "PUT", "DELETE"])

# Error bodies are logged truncated to this many characters
ERROR_BODY_LIMIT = 200


# =============================================================================
# SECRET MASKING FOR LOG OUTPUT
# =============================================================================

# Error bodies end up in warning logs. Values that look like credentials are
# replaced before they get there. Results returned to the caller are never
# touched.

SECRET_PATTERNS = [
    (re.compile(r"(token[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.I), r"\1***MASKED***"),
    (re.compile(r"(password[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.I), r"\1***MASKED***"),
    (re.compile(r"(secret[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.I), r"\1***MASKED***"),
    (re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)[^\"'\s,}]+", re.I), r"\1***MASKED***"),
    (re.compile(r"(bearer\s+)[^\s\"']+", re.I), r"\1***MASKED***"),
]


def mask_secrets(text: str) -> str:
    """
    Mask credential-looking values in a string.

    Example:
        >>> mask_secrets('{"token": "abc123"}')
        '{"token": "***MASKED***"}'
    """
    for pattern, replacement in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


# =============================================================================
# ERROR CLASSES
# =============================================================================


class ArgocdError(Exception):
    """
    The ArgoCD server answered with a non-success status.

    HTTP errors from ArgoCD include:
    - Status code (404, 500, etc.)
    - Message from ArgoCD
    - Additional details (the "error" field, or raw body text)

    USAGE:
    ------
    try:
        app = await client.applications.get_application("nonexistent")
    except ArgocdError as e:
        print(f"Error {e.code}: {e.message}")  # Error 404: Not found
    """

    def __init__(self, code: int, message: str, details: str | None = None) -> None:
        """
        Initialize ArgoCD error.

        Args:
            code: HTTP status code (e.g., 404, 500)
            message: Primary error message from ArgoCD
            details: Additional error details (optional)
        """
        self.code = code
        self.message = message
        self.details = details
        super().__init__(str(self))

    @property
    def status_code(self) -> int:
        """HTTP status code, same as ``code``."""
        return self.code

    def __str__(self) -> str:
        """
        Format error for display.

        Example:
            "ArgoCD API error (404): Not found - app 'foo' does not exist"
        """
        base = f"ArgoCD API error ({self.code}): {self.message}"
        if self.details:
            base += f" - {self.details}"
        return base


class NetworkError(Exception):
    """
    No usable response was received from the ArgoCD server.

    Raised for transport failures (DNS, connection refused, TLS, timeouts)
    and for success responses whose body cannot be decompressed or is not
    valid JSON. The underlying exception is chained as __cause__.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# =============================================================================
# REQUEST CORE
# =============================================================================


class ApiClient:
    """
    Authenticated JSON request executor shared by all resource wrappers.

    Wrappers receive a reference to one ApiClient and call request(); they
    never subclass it.

    LIFECYCLE:
    ----------
    1. Create: api = ApiClient(config)
    2. Enter:  async with api: ...
    3. Use:    await api.request("GET", "/version")
    4. Exit:   connections closed

    request() before entering the context raises RuntimeError.
    """

    def __init__(self, config: ClientConfig) -> None:
        """
        Initialize the request core.

        NOTE: This only stores the config. The HTTP client is created in
        __aenter__.

        Args:
            config: Immutable server URL, token, TLS and timeout settings.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> ClientConfig:
        """The immutable configuration this client was built with."""
        return self._config

    async def __aenter__(self) -> ApiClient:
        """
        Enter async context and create the HTTP client.

        Default headers live on the httpx client, so every request carries
        them unless a caller overrides a key for one request.

        Raises:
            RuntimeError: If this client is already open

        Returns:
            self (the client) for use in the 'as' clause
        """
        if self._client is not None:
            raise RuntimeError("ApiClient is already open; exit it before entering again.")

        self._client = httpx.AsyncClient(
            base_url=self._config.api_url,
            headers={
                "Authorization": f"Bearer {self._config.token.get_secret_value()}",
                "Content-Type": "application/json",
            },
            # None disables httpx's default 5 second timeout
            timeout=self._config.timeout,
            verify=not self._config.insecure,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        """Exit async context and close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        params: Sequence[tuple[str, str]] | None = None,
        json_data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Make one HTTP request to the ArgoCD API.

        This is the CORE REQUEST METHOD. All wrapper methods use it.

        QUERY PARAMETERS:
        -----------------
        params is a sequence of (key, value) pairs rather than a dict so that
        list-valued parameters can repeat a key:

            [("projects", "a"), ("projects", "b")]  ->  ?projects=a&projects=b

        Values of a repeated key keep their input order. Distinct keys are
        grouped by httpx, so interleaving them is not preserved.

        HEADERS:
        --------
        Authorization and Content-Type are always sent. Entries in `headers`
        are laid over them, so a caller-supplied key wins.

        Args:
            method: "GET", "POST", "PUT" or "DELETE"
            path: API path below /api/v1 (e.g., "/applications/myapp")
            params: Query parameters as (key, value) pairs (optional)
            json_data: Request body; serialized to JSON here (optional)
            headers: Extra or overriding headers (optional)

        Returns:
            The decoded JSON body, unchanged. None for an empty body.

        Raises:
            ArgocdError: On a non-2xx response
            NetworkError: On transport failure or an undecodable 2xx body
            ValueError: On an unsupported HTTP method
            RuntimeError: If client not initialized (forgot async with)
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        log = logger.bind(method=method, path=path)
        log.debug("ArgoCD API request", params=list(params) if params else None)

        try:
            response = await self._client.request(
                method,
                path,
                params=list(params) if params else None,
                json=json_data,
                headers=dict(headers) if headers else None,
            )
        except httpx.RequestError as exc:
            # TransportError, or DecodingError for a corrupt compressed body
            log.warning("ArgoCD API request failed", error=str(exc))
            raise NetworkError(
                f"Request {method} {path} failed: {exc.__class__.__name__}: {exc}"
            ) from exc

        if not response.is_success:
            raise self._api_error(response, log)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as exc:
            log.warning("ArgoCD API returned invalid JSON", status=response.status_code)
            raise NetworkError(
                f"Could not decode response from {method} {path} as JSON"
            ) from exc

    @staticmethod
    def _api_error(response: httpx.Response, log: Any) -> ArgocdError:
        """
        Build an ArgocdError from a non-2xx response.

        ArgoCD error bodies look like {"message": "...", "error": "..."}.
        When the body is missing or is not JSON, the message falls back to
        "HTTP <status>" and the raw text becomes the details.
        """
        error_body = response.text
        log.warning(
            "ArgoCD API error",
            status=response.status_code,
            body=mask_secrets(error_body[:ERROR_BODY_LIMIT]),
        )

        message = f"HTTP {response.status_code}"
        details = None
        try:
            error_json = response.json()
        except ValueError:
            details = error_body[:ERROR_BODY_LIMIT] if error_body else None
        else:
            if isinstance(error_json, dict):
                message = error_json.get("message") or message
                details = error_json.get("error")

        return ArgocdError(
            code=response.status_code,
            message=message,
            details=details,
        )
