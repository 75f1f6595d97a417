"""Tests for home.routing.route: path normalization and matching."""

import pytest

from home.errors import ConfigurationError
from home.routing.route import Route


def _handler(request, response) -> str:
    return "ok"


class TestRouteCreate:
    def test_root(self) -> None:
        route = Route.create("/", _handler)
        assert route.path == "/"
        assert route.prefix_path == "/"

    def test_without_trailing_slash(self) -> None:
        route = Route.create("/foo", _handler)
        assert route.path == "/foo"
        assert route.prefix_path == "/foo/"

    def test_with_trailing_slash(self) -> None:
        route = Route.create("/foo/", _handler)
        assert route.path == "/foo"
        assert route.prefix_path == "/foo/"

    def test_nested(self) -> None:
        route = Route.create("/api/v1", _handler)
        assert route.path == "/api/v1"
        assert route.prefix_path == "/api/v1/"

    def test_method_is_uppercased(self) -> None:
        assert Route.create("/", _handler, method="get").method == "GET"

    def test_no_method_by_default(self) -> None:
        assert Route.create("/", _handler).method is None

    def test_rejects_relative_path(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Route.create("foo", _handler)
        assert "'foo'" in str(exc_info.value)

    def test_rejects_empty_path(self) -> None:
        with pytest.raises(ConfigurationError):
            Route.create("", _handler)

    def test_frozen(self) -> None:
        route = Route.create("/foo", _handler)
        with pytest.raises(AttributeError):
            route.path = "/bar"  # type: ignore[misc]


class TestRouteMatches:
    def test_exact_route_matches_only_its_path(self) -> None:
        route = Route.create("/foo", _handler, method="GET")
        assert route.matches("GET", "/foo")
        assert not route.matches("GET", "/foo/bar")
        assert not route.matches("GET", "/foobar")

    def test_exact_route_checks_method(self) -> None:
        route = Route.create("/foo", _handler, method="GET")
        assert not route.matches("POST", "/foo")

    def test_prefix_route_matches_sub_paths(self) -> None:
        route = Route.create("/foo", _handler, prefix_match=True)
        assert route.matches("GET", "/foo")
        assert route.matches("GET", "/foo/bar")
        assert route.matches("POST", "/foo/bar/baz")

    def test_prefix_route_does_not_match_sibling_names(self) -> None:
        route = Route.create("/foo", _handler, prefix_match=True)
        assert not route.matches("GET", "/foobar")

    def test_trailing_slash_pattern_matches_same_set(self) -> None:
        plain = Route.create("/foo", _handler, prefix_match=True)
        slashed = Route.create("/foo/", _handler, prefix_match=True)
        for path in ("/foo", "/foo/", "/foo/bar", "/foobar", "/"):
            assert plain.matches("GET", path) == slashed.matches("GET", path)

    def test_root_prefix_matches_everything(self) -> None:
        route = Route.create("/", _handler, prefix_match=True)
        for path in ("/", "/a", "/a/b/c.js"):
            assert route.matches("GET", path)

    def test_exact_root_matches_only_root(self) -> None:
        route = Route.create("/", _handler, method="GET")
        assert route.matches("GET", "/")
        assert not route.matches("GET", "/a")


class TestRelativePath:
    def test_prefix_route_strips_mount_point(self) -> None:
        route = Route.create("/static", _handler, prefix_match=True)
        assert route.relative_path("/static/css/app.css") == "/css/app.css"

    def test_mount_point_itself_is_root(self) -> None:
        route = Route.create("/static", _handler, prefix_match=True)
        assert route.relative_path("/static") == "/"

    def test_root_mount_keeps_full_path(self) -> None:
        route = Route.create("/", _handler, prefix_match=True)
        assert route.relative_path("/a/b") == "/a/b"

    def test_exact_route_keeps_full_path(self) -> None:
        route = Route.create("/foo", _handler, method="GET")
        assert route.relative_path("/foo") == "/foo"
