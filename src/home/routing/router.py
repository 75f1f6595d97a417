"""Ordered route table.

A flat list scanned front to back. Registration order is the only
priority rule.
"""

from collections.abc import Iterator

from home.middleware.protocol import Middleware
from home.routing.route import Route


class RouteTable:
    """Routes in registration order.

    Usage::

        table = RouteTable()
        table.register(None, "/", StaticFiles("static"), prefix_match=True)
        table.register("GET", "/status", status)
        table.compile()
        for route in table.iter_matches("GET", "/status"):
            ...
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] | tuple[Route, ...] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append *route*; it matches after every route added before it.

        Must be called before compile().
        """
        routes = self._routes
        if self._compiled or not isinstance(routes, list):
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        routes.append(route)

    def register(
        self,
        method: str | None,
        path: str,
        handler: Middleware,
        *,
        prefix_match: bool = False,
    ) -> Route:
        """Normalize and append a route. Returns the stored Route."""
        route = Route.create(path, handler, method=method, prefix_match=prefix_match)
        self.add(route)
        return route

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._routes = tuple(self._routes)
        self._compiled = True

    def iter_matches(self, method: str, path: str) -> Iterator[Route]:
        """Lazily yield the routes matching *method* and *path*, in order.

        Each call returns an independent cursor; the dispatcher pulls one
        route at a time and stops as soon as a handler produces a result.
        """
        for route in self._routes:
            if route.matches(method, path):
                yield route

    @property
    def routes(self) -> tuple[Route, ...]:
        return tuple(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self._routes)
