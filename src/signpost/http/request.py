"""Immutable HTTP request.

Frozen metadata built by the Router from a match (or by the ASGI
boundary from a scope). The request is honest about what it is:
received data that doesn't change.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from signpost.http.headers import HeaderInput, Headers
from signpost.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` is always upper-case. ``params`` holds the path
    parameters bound by the route match, as a read-only mapping; optional
    placeholders that were not present in the path are absent from it.

    Prefer :meth:`create`, which parses the query string out of ``uri``
    and accepts plain mappings for headers and query.
    """

    method: str
    uri: str
    params: Mapping[str, str] = field(default_factory=dict)
    query: QueryParams = field(default_factory=QueryParams)
    headers: Headers = field(default_factory=Headers)
    body: bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    # -- Path parameters --

    def get_params(self) -> dict[str, str]:
        """Return a copy of all bound path parameters."""
        return dict(self.params)

    def get_param(self, name: str, default: Any = None) -> Any:
        """Return path parameter *name*, or *default* if it was not bound."""
        return self.params.get(name, default)

    # -- Query / headers --

    def get_query_param(self, name: str, default: str | None = None) -> str | None:
        """Return the first query value for *name*, or *default*."""
        return self.query.get(name, default)

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name, default)

    @property
    def path(self) -> str:
        """The URI without its query string."""
        return self.uri.partition("?")[0]

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    # -- Body --

    @property
    def is_json(self) -> bool:
        """True if the Content-Type declares a JSON body."""
        content_type = self.content_type
        return content_type is not None and "application/json" in content_type

    def text(self) -> str | None:
        """The body decoded as UTF-8, or ``None`` if there is no body.

        Invalid byte sequences are replaced with U+FFFD rather than raising.
        """
        if self.body is None:
            return None
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON.

        Returns ``None`` when the request is not declared as JSON or has
        no body. Malformed JSON raises ``ValueError``.
        """
        if not self.is_json or not self.body:
            return None
        import json as json_module

        return json_module.loads(self.body)

    # -- Factory --

    @classmethod
    def create(
        cls,
        method: str,
        uri: str,
        params: Mapping[str, str] | None = None,
        *,
        query: str | bytes | Mapping[str, str] | None = None,
        headers: HeaderInput | None = None,
        body: bytes | str | None = None,
    ) -> Request:
        """Build a Request, filling in what the caller did not supply.

        When *query* is omitted it is parsed from the ``?`` part of *uri*.
        A ``str`` body is encoded as UTF-8.
        """
        if query is None:
            query = uri.partition("?")[2]
        if isinstance(body, str):
            body = body.encode("utf-8")
        return cls(
            method=method,
            uri=uri,
            params=params or {},
            query=query if isinstance(query, QueryParams) else QueryParams(query),
            headers=headers if isinstance(headers, Headers) else Headers(headers),
            body=body,
        )
