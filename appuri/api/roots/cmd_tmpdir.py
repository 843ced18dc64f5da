"""Tmpdir command - create a private temporary directory."""

from collections.abc import Iterator

from ...utils.uri_to_path import uri_to_path
from .._output_schemas.roots import RootsTmpdirOutput
from ..StageResult import StageResult
from .create_temporary_directory import create_temporary_directory


def cmd_tmpdir() -> StageResult:
    """Create a fresh temporary directory and report its location."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Creating directory...")
        try:
            uri = create_temporary_directory()
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = "Failed to create temporary directory"
            result_obj.output = RootsTmpdirOutput(errors=[str(e)], warnings=[], uri="", path="").model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Created {uri}"
        result_obj.output = RootsTmpdirOutput(
            errors=[],
            warnings=[],
            uri=uri,
            path=str(uri_to_path(uri)),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Creating temporary directory...", progress_callback=do_work)
