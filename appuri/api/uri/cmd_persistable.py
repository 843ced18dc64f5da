"""Persistable command - express a URI relative to a symbolic root."""

from collections.abc import Iterator

from .._output_schemas.uri import UriPersistableOutput
from ..roots.DirectoryRegistry import DirectoryRegistry
from ..roots.load_registry import load_registry
from ..roots.RootUnavailableError import RootUnavailableError
from ..StageResult import StageResult
from .to_persistable import to_persistable


def cmd_persistable(uri: str, registry: DirectoryRegistry | None = None) -> StageResult:
    """Convert ``uri`` to a persistable URI.

    Args:
        uri: File or persistable URI
        registry: Root registry; the configured platform registry if omitted
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        errors: list[str] = []
        persistable: str | None = None

        yield (0.3, "Loading directory registry...")
        try:
            active = registry if registry is not None else load_registry()
            yield (0.6, "Matching storage roots...")
            persistable = to_persistable(uri, active)
        except (RootUnavailableError, ValueError) as e:
            errors.append(str(e))

        if persistable is None and not errors:
            errors.append(f"URI is outside every storage root: {uri}")

        yield (1.0, "Complete")
        result_obj.result = f"Converted {uri} to {persistable}" if persistable else f"Cannot make {uri} persistable"
        result_obj.output = UriPersistableOutput(
            errors=errors,
            warnings=[],
            uri=uri,
            persistable=persistable,
        ).model_dump(mode="python")
        result_obj.success = persistable is not None

    return StageResult(announce=f"Converting {uri} to a persistable URI...", progress_callback=do_work)
