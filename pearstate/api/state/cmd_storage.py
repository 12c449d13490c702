"""Show the storage directory a link maps to."""

from collections.abc import Iterator

from .._output_schemas.state import StateStorageOutput
from ..PearStateError import PearStateError
from ..StageResult import StageResult
from ..storage.storage_from_link import storage_from_link


def cmd_storage(link: str, dir: str | None = None) -> StageResult:
    """Derive the by-dkey or by-random storage directory for ``link``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Deriving storage...")
        try:
            storage = storage_from_link(link, dir=dir)
        except (PearStateError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Could not derive storage: {e}"
            result_obj.output = StateStorageOutput(
                errors=[str(e)], warnings=[], link=link, storage=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Storage: {storage}"
        result_obj.output = StateStorageOutput(errors=[], warnings=[], link=link, storage=storage).model_dump(
            mode="python"
        )
        result_obj.success = True

    return StageResult(announce=f"Deriving storage for {link}...", progress_callback=do_work)
