"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pearstate.constants import DEFAULT_TIMESTAMP_FORMAT


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - generator yielding (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
