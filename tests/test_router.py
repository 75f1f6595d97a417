"""Tests for home.routing.router: ordered route table."""

import pytest

from home.routing.route import Route
from home.routing.router import RouteTable


def _a(request, response) -> str:
    return "a"


def _b(request, response) -> str:
    return "b"


def _c(request, response) -> str:
    return "c"


class TestRegistration:
    def test_register_returns_stored_route(self) -> None:
        table = RouteTable()
        route = table.register("GET", "/foo/", _a)
        assert table.routes == (route,)
        assert route.path == "/foo"

    def test_add_preserves_order(self) -> None:
        table = RouteTable()
        table.register(None, "/", _a, prefix_match=True)
        table.register("GET", "/x", _b)
        table.register("POST", "/x", _c)
        assert [r.handler for r in table] == [_a, _b, _c]
        assert len(table) == 3

    def test_add_after_compile_raises(self) -> None:
        table = RouteTable()
        table.compile()
        with pytest.raises(RuntimeError, match="after compilation"):
            table.add(Route.create("/", _a))

    def test_routes_survive_compile(self) -> None:
        table = RouteTable()
        table.register("GET", "/x", _a)
        table.compile()
        assert [r.path for r in table.routes] == ["/x"]


class TestIterMatches:
    def test_registration_order_is_priority(self) -> None:
        table = RouteTable()
        table.register(None, "/", _a, prefix_match=True)
        table.register("GET", "/x", _b)
        table.register(None, "/x", _c, prefix_match=True)

        matches = list(table.iter_matches("GET", "/x"))
        assert [r.handler for r in matches] == [_a, _b, _c]

    def test_filters_by_method(self) -> None:
        table = RouteTable()
        table.register("GET", "/x", _a)
        table.register("POST", "/x", _b)

        assert [r.handler for r in table.iter_matches("POST", "/x")] == [_b]

    def test_no_match(self) -> None:
        table = RouteTable()
        table.register("GET", "/x", _a)
        assert list(table.iter_matches("GET", "/y")) == []

    def test_is_lazy(self) -> None:
        table = RouteTable()
        table.register(None, "/", _a, prefix_match=True)
        table.register(None, "/", _b, prefix_match=True)

        cursor = table.iter_matches("GET", "/")
        assert next(cursor).handler is _a
        assert next(cursor).handler is _b
        with pytest.raises(StopIteration):
            next(cursor)

    def test_cursors_are_independent(self) -> None:
        table = RouteTable()
        table.register(None, "/", _a, prefix_match=True)
        table.register(None, "/", _b, prefix_match=True)

        first = table.iter_matches("GET", "/")
        second = table.iter_matches("GET", "/")
        next(first)
        assert next(second).handler is _a
        assert next(first).handler is _b
