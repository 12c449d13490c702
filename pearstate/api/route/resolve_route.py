"""Apply a route table to a pathname."""

from collections.abc import Iterable, Mapping

from .RouteResult import RouteResult


def resolve_route(
    route: str,
    routes: Mapping[str, str] | None = None,
    unrouted: Iterable[str] | None = None,
) -> RouteResult:
    """Rewrite ``route`` through the ``routes`` table.

    A route starting with any of the given ``unrouted`` prefixes is returned
    untouched without consulting the table. Otherwise only an exact key match
    rewrites it.

    Examples:
        >>> resolve_route("/a", {"/a": "/b"})
        RouteResult(entrypoint='/b', routed=True)
        >>> resolve_route("/assets/x", {"/assets/x": "/b"}, ["/assets/"])
        RouteResult(entrypoint='/assets/x', routed=False)
    """
    if any(route.startswith(prefix) for prefix in unrouted or ()):
        return RouteResult(entrypoint=route, routed=False)

    if not routes or route not in routes:
        return RouteResult(entrypoint=route, routed=False)

    return RouteResult(entrypoint=routes[route], routed=True)
