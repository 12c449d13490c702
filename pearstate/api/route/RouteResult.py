"""RouteResult dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteResult:
    """Entrypoint chosen for a route and whether the route table rewrote it."""

    entrypoint: str
    routed: bool = False
