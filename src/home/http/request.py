"""Immutable HTTP request.

Frozen metadata with async body access. A copy with a mount-relative
``path`` is made for each prefix-matched route the dispatcher invokes.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from home._internal.asgi import Receive
from home.http.headers import Headers
from home.http.query import QueryParams

if TYPE_CHECKING:
    from home.routing.route import Route


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``url_path`` is the full decoded request path. ``path`` is the same
    path as seen by the current middleware: for a route mounted with
    ``use("/static", ...)`` a request for ``/static/app.js`` has
    ``path == "/app.js"``.
    """

    method: str
    path: str
    url_path: str
    query: QueryParams
    headers: Headers
    http_version: str
    client: tuple[str, int] | None

    # Private: ASGI receive callable for body streaming
    _receive: Receive

    # Private: body cache, shared by every mounted copy of the request
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def url(self) -> str:
        """Full request URL (path + query string)."""
        qs = self.query.raw
        if qs:
            return f"{self.url_path}?{qs.decode('latin-1')}"
        return self.url_path

    def mounted(self, route: Route) -> Request:
        """Return this request as seen by *route*'s handler."""
        return replace(self, path=route.relative_path(self.url_path))

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached; the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def text(self) -> str:
        raw = await self.body()
        return raw.decode("utf-8")

    async def json(self) -> Any:
        """Parse the body as JSON."""
        import json as json_module

        raw = await self.body()
        return json_module.loads(raw)

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any], receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        path = scope.get("path") or "/"
        return cls(
            method=scope["method"].upper(),
            path=path,
            url_path=path,
            query=QueryParams(scope.get("query_string", b"")),
            headers=Headers(tuple(scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
