# ABOUTME: Path and query-string helpers shared by the resource wrappers
# ABOUTME: Encodes identifiers into path segments and collects query parameters

"""
URL building helpers.

Wrappers build their query strings with QueryBuilder and insert caller
identifiers into paths with segment(). Both keep the wire format in one
place:

    query = QueryBuilder()
    query.add("name", name)                 # omitted when None or ""
    query.add_flag("upsert", upsert)        # "true" only when set
    query.add_all("projects", projects)     # one entry per element

    await api.request("GET", "/applications", params=query.items())
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Iterable


def segment(value: str) -> str:
    """
    Percent-encode a caller identifier for use as one path segment.

    Cluster servers and repository URLs contain "/" and ":", which would
    otherwise split the path:

        >>> segment("https://kubernetes.default.svc")
        'https%3A%2F%2Fkubernetes.default.svc'
        >>> segment("my-app")
        'my-app'
    """
    return quote(str(value), safe="")


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryBuilder:
    """Ordered list of query parameters that allows repeated keys."""

    def __init__(self) -> None:
        self._items: list[tuple[str, str]] = []

    def add(self, key: str, value: object | None) -> QueryBuilder:
        """Append key=value unless value is None or an empty string."""
        if value is None or value == "":
            return self
        self._items.append((key, _format(value)))
        return self

    def require(self, key: str, value: object) -> QueryBuilder:
        """Append key=value unconditionally, for parameters the endpoint needs."""
        self._items.append((key, _format(value)))
        return self

    def add_flag(self, key: str, enabled: bool | None) -> QueryBuilder:
        """Append key=true when enabled; a false flag leaves the server default."""
        if enabled:
            self._items.append((key, "true"))
        return self

    def add_all(self, key: str, values: Iterable[object] | None) -> QueryBuilder:
        """Append one key=value entry per element, in order."""
        for value in values or ():
            self._items.append((key, _format(value)))
        return self

    def items(self) -> list[tuple[str, str]] | None:
        """Collected parameters, or None when empty so no "?" is sent."""
        return list(self._items) or None

    def __len__(self) -> int:
        return len(self._items)
