"""Find the package.json governing a directory."""

import json
import os
from collections.abc import Iterator

from .._output_schemas.state import StatePkgOutput
from ..pkg.appname import appname
from ..pkg.local_pkg import local_pkg_sync
from ..StageResult import StageResult


def cmd_pkg(dir: str | None = None) -> StageResult:
    """Walk up from ``dir`` (default cwd) to the nearest package.json."""
    start = dir or os.getcwd()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Walking up to package.json...")
        try:
            pkg = local_pkg_sync(start)
        except (json.JSONDecodeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Could not read package.json: {e}"
            result_obj.output = StatePkgOutput(errors=[str(e)], warnings=[], dir=start).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        name = appname(pkg)
        result_obj.result = f"Found package {name}" if pkg is not None else "No package.json found"
        result_obj.output = StatePkgOutput(
            errors=[],
            warnings=[] if pkg is not None else [f"No package.json found from {start}"],
            dir=start,
            pkg=pkg,
            appname=name,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Looking up package.json from {start}...", progress_callback=do_work)
