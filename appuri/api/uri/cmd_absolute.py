"""Absolute command - resolve a URI to an absolute file URI."""

from collections.abc import Iterator

from ...utils.uri_to_path import uri_to_path
from .._output_schemas.uri import UriAbsoluteOutput
from ..roots.DirectoryRegistry import DirectoryRegistry
from ..roots.load_registry import load_registry
from ..roots.RootUnavailableError import RootUnavailableError
from ..StageResult import StageResult
from .is_persistable import is_persistable
from .to_absolute import to_absolute


def cmd_absolute(uri: str, registry: DirectoryRegistry | None = None) -> StageResult:
    """Resolve ``uri`` to an absolute file URI for the current run.

    Args:
        uri: Persistable or file URI
        registry: Root registry; the configured platform registry if omitted
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        errors: list[str] = []
        persistable = is_persistable(uri)
        absolute: str | None = None

        yield (0.3, "Loading directory registry...")
        try:
            active = registry if registry is not None else load_registry()
            yield (0.6, "Resolving URI...")
            absolute = to_absolute(uri, active)
        except (RootUnavailableError, ValueError) as e:
            errors.append(str(e))

        if absolute is None and not errors:
            errors.append(f"Not a persistable or absolute file URI: {uri}")

        yield (1.0, "Complete")
        result_obj.result = f"Resolved {uri} to {absolute}" if absolute else f"Cannot resolve {uri}"
        result_obj.output = UriAbsoluteOutput(
            errors=errors,
            warnings=[],
            uri=uri,
            persistable=persistable,
            absolute=absolute,
            path=str(uri_to_path(absolute)) if absolute else None,
        ).model_dump(mode="python")
        result_obj.success = absolute is not None

    return StageResult(announce=f"Resolving absolute URI for {uri}...", progress_callback=do_work)
