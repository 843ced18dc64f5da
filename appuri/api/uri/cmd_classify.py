"""Classify command - report which form a URI is in."""

from collections.abc import Iterator

from .._output_schemas.uri import UriClassifyOutput
from ..StageResult import StageResult
from .is_file_uri import is_file_uri
from .is_persistable import is_persistable


def cmd_classify(uri: str) -> StageResult:
    """Classify ``uri`` as persistable, file, or other. No registry is needed."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Inspecting scheme...")
        root: str | None = None
        if is_persistable(uri):
            kind = "persistable"
            root = uri.split(":", 1)[0]
        elif is_file_uri(uri):
            kind = "file"
        else:
            kind = "other"

        yield (1.0, "Complete")
        result_obj.result = f"{uri} is a {kind} URI"
        result_obj.output = UriClassifyOutput(
            errors=[],
            warnings=[],
            uri=uri,
            kind=kind,
            root=root,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Classifying {uri}...", progress_callback=do_work)
