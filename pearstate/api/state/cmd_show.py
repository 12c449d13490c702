"""Show the resolved launch state."""

import asyncio
from collections.abc import Iterator
from typing import Any

from .._output_schemas.state import StateShowOutput
from ..PearStateError import PearStateError
from ..StageResult import StageResult
from .config_from import config_from
from .State import State


def cmd_show(
    link: str | None = None,
    dir: str | None = None,
    flags: dict[str, Any] | None = None,
    pid: int | None = None,
    run: bool = False,
) -> StageResult:
    """Resolve a State from CLI-style inputs and report its config view.

    Args:
        link: Raw link; defaults to the working directory
        dir: Project directory
        flags: Launch flags, passed through verbatim
        pid: Process id
        run: Treat the launch as a run rather than development
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Resolving link and storage...")
        try:
            state = State(link=link, dir=dir, flags=flags or {}, pid=pid, run=run)
            yield (0.7, "Looking up package.json...")
            asyncio.run(state.load_pkg())
        except (PearStateError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Could not resolve state: {e}"
            result_obj.output = StateShowOutput(errors=[str(e)], warnings=[], state={}).model_dump(mode="python")
            result_obj.success = False
            return

        warnings: list[str] = []
        if state.pkg is None and state.key is None:
            warnings.append(f"No package.json found from {state.dir}")

        config = config_from(state)
        # Only NODE_ENV is derived here; the rest of the environment is the caller's
        config["env"] = {"NODE_ENV": state.env["NODE_ENV"]}

        yield (1.0, "Complete")
        result_obj.result = f"Resolved {state.applink}"
        result_obj.output = StateShowOutput(
            errors=[],
            warnings=warnings,
            state=config,
            appname=state.name,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Resolving state for {link or 'working directory'}...", progress_callback=do_work)
