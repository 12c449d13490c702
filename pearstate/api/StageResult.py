"""Outcome of a pearstate command, rendered by the CLI in four stages."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back to the CLI.

    ``announce`` is shown before any work runs. ``progress_callback`` performs
    the resolution, yielding ``(fraction, message)`` pairs, and fills in
    ``result``, ``output`` and ``success`` on the instance it receives.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
