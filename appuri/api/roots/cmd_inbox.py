"""Inbox command - show the Documents inbox location."""

from collections.abc import Iterator

from ...utils.uri_to_path import uri_to_path
from .._output_schemas.roots import RootsInboxOutput
from ..StageResult import StageResult
from .DirectoryRegistry import DirectoryRegistry
from .documents_inbox import documents_inbox
from .load_registry import load_registry
from .RootUnavailableError import RootUnavailableError


def cmd_inbox(registry: DirectoryRegistry | None = None) -> StageResult:
    """Report where other applications drop files for this one."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Resolving Documents root...")
        try:
            active = registry if registry is not None else load_registry()
            uri = documents_inbox(active)
        except (ValueError, RootUnavailableError) as e:
            yield (1.0, "Complete")
            result_obj.result = "Cannot locate inbox"
            result_obj.output = RootsInboxOutput(errors=[str(e)], warnings=[], uri=None, path=None).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Inbox at {uri}"
        result_obj.output = RootsInboxOutput(
            errors=[],
            warnings=[],
            uri=uri,
            path=str(uri_to_path(uri)),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Locating Documents inbox...", progress_callback=do_work)
