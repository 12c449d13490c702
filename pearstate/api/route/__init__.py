"""Route table resolution."""

from .resolve_route import resolve_route
from .RouteResult import RouteResult

__all__ = ["RouteResult", "resolve_route"]
