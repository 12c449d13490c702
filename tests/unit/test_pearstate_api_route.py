"""Unit tests for pearstate.api.route."""

import pytest

from pearstate.api.route import RouteResult, resolve_route

pytestmark = pytest.mark.route


def test_no_routes_returns_pathname() -> None:
    result = resolve_route("/test/path", None, [])
    assert result.entrypoint == "/test/path"
    assert result.routed is False


def test_exact_match_is_routed() -> None:
    result = resolve_route("/test/path", {"/test/path": "/new/path"}, [])
    assert result == RouteResult(entrypoint="/new/path", routed=True)


def test_unrouted_prefix_skips_route_table() -> None:
    result = resolve_route("/assets/logo.png", {"/assets/logo.png": "/other.png"}, ["/assets/"])
    assert result == RouteResult(entrypoint="/assets/logo.png", routed=False)


def test_only_given_prefixes_are_unrouted() -> None:
    pathname = "/node_modules/.bin/tool"
    result = resolve_route(pathname, {pathname: "/elsewhere"}, [])
    assert result == RouteResult(entrypoint="/elsewhere", routed=True)


def test_any_unrouted_prefix_matches() -> None:
    result = resolve_route("/b/x", {"/b/x": "/y"}, ["/a/", "/b/"])
    assert result.routed is False


def test_prefix_of_route_key_is_not_rewritten() -> None:
    result = resolve_route("/test/path/deeper", {"/test/path": "/new/path"}, [])
    assert result == RouteResult(entrypoint="/test/path/deeper", routed=False)


def test_missing_key_is_not_routed() -> None:
    assert resolve_route("/x", {"/y": "/z"}).routed is False
