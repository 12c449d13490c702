"""Resolve a route through a route table."""

from collections.abc import Iterator

from .._output_schemas.state import StateRouteOutput
from ..route.resolve_route import resolve_route
from ..StageResult import StageResult


def cmd_route(route: str, routes: dict[str, str] | None = None, unrouted: list[str] | None = None) -> StageResult:
    """Apply ``routes`` and ``unrouted`` to ``route``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Applying route table...")
        resolved = resolve_route(route, routes, unrouted)
        yield (1.0, "Complete")
        result_obj.result = f"{route} -> {resolved.entrypoint}" if resolved.routed else f"{route} is not routed"
        result_obj.output = StateRouteOutput(
            errors=[],
            warnings=[],
            route=route,
            entrypoint=resolved.entrypoint,
            routed=resolved.routed,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Resolving route {route}...", progress_callback=do_work)
