# ABOUTME: Structured logging for the ArgoCD SDK
# ABOUTME: Opt-in structlog setup, SDK version tagging and scoped correlation IDs

"""
Structured logging for the SDK.

=============================================================================
WHAT IS THIS FILE?
=============================================================================

Every SDK module logs through a structlog module logger:

    logger.debug("ArgoCD API request", method="GET", path="/applications")

Rendering is the host application's decision. Importing the SDK changes
nothing; logging is only configured when the host asks for it, either
directly or through environment settings:

    configure_logging(level="DEBUG")               # explicit
    ArgocdClient.from_settings(load_settings())    # ARGOCD_SDK_LOG_LEVEL / _LOG_JSON

=============================================================================
CORRELATION IDs
=============================================================================

A correlation ID ties together every request made for one unit of work,
e.g. one reconcile loop. It lives in a ContextVar, so concurrent asyncio
tasks each see their own value:

    async def reconcile(app):
        with correlation_scope(f"sync-{app}"):
            await client.applications.sync_application(app)

Events logged outside a scope carry no correlation_id at all. The SDK never
invents one behind the caller's back.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableMapping

    from argocd_sdk.config import SdkSettings


correlation_id: ContextVar[str | None] = ContextVar("argocd_sdk_correlation_id", default=None)


# =============================================================================
# CORRELATION IDs
# =============================================================================


def new_correlation_id() -> str:
    """Return a fresh 8-character hex ID (not stored)."""
    return uuid.uuid4().hex[:8]


def get_correlation_id() -> str | None:
    """The correlation ID of the current context, or None outside a scope."""
    return correlation_id.get()


def set_correlation_id(cid: str | None = None) -> str:
    """
    Set the correlation ID for the current context.

    Prefer correlation_scope(), which restores the previous value on exit.

    Args:
        cid: ID to use. A new one is generated when omitted.

    Returns:
        The ID now in effect.
    """
    cid = cid or new_correlation_id()
    correlation_id.set(cid)
    return cid


@contextmanager
def correlation_scope(cid: str | None = None) -> Iterator[str]:
    """
    Tag all SDK log events inside the block with one correlation ID.

    Scopes nest; leaving a scope restores the enclosing ID.
    """
    token = correlation_id.set(cid or new_correlation_id())
    try:
        yield correlation_id.get()
    finally:
        correlation_id.reset(token)


# =============================================================================
# PROCESSORS
# =============================================================================


def add_correlation_id(
    logger: Any,  # noqa: ARG001 - structlog processor signature
    method_name: str,  # noqa: ARG001
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add correlation_id when one is set and the event has none."""
    cid = correlation_id.get()
    if cid:
        event_dict.setdefault("correlation_id", cid)
    return event_dict


def add_sdk_version(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Tag the event with the installed SDK version."""
    # Imported here: the package __init__ imports this module.
    from argocd_sdk import __version__

    event_dict["sdk_version"] = __version__
    return event_dict


def build_processors(json_output: bool = False) -> list[Any]:
    """
    The processor chain configure_logging() installs.

    Exposed so hosts with their own structlog setup can reuse the SDK's
    enrichment steps and pick their own renderer.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_correlation_id,
        add_sdk_version,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


# =============================================================================
# CONFIGURATION
# =============================================================================


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structlog for the host process.

    Args:
        level: "DEBUG" shows one line per SDK request, "WARNING" only API
               errors and unreachable servers. Unknown names mean INFO.
        json_output: JSON lines instead of colored console output.
    """
    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: SdkSettings) -> None:
    """Apply ARGOCD_SDK_LOG_LEVEL and ARGOCD_SDK_LOG_JSON."""
    configure_logging(level=settings.log_level, json_output=settings.log_json)
