"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the root callback.

    Raises:
        RuntimeError: If no context in the chain carries a display format.
        ValueError: If the stored format is not json or yaml.
    """
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F, ctx: typer.Context) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Function that returns StageResult
        ctx: Context of the running command; its chain holds the ``--display`` choice

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """
    display_format = _display_format(ctx)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from pearstate.cli.display import get_display

        _run_single_execution(func, args, kwargs, get_display(), display_format)

    return wrapper  # type: ignore[return-value]
