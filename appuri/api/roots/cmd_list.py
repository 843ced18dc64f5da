"""List command - show the current location of every symbolic root."""

from collections.abc import Iterator

from .._output_schemas.roots import RootsListOutput
from ..StageResult import StageResult
from .DirectoryRegistry import DirectoryRegistry
from .load_registry import load_registry
from .RootUnavailableError import RootUnavailableError
from .SymbolicRoot import SymbolicRoot


def cmd_list(registry: DirectoryRegistry | None = None) -> StageResult:
    """List every symbolic root with its marker and current absolute URI."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        errors: list[str] = []
        entries: list[dict] = []

        yield (0.2, "Loading directory registry...")
        try:
            active = registry if registry is not None else load_registry()
        except ValueError as e:
            errors.append(str(e))
            active = None

        if active is not None:
            roots = SymbolicRoot.priority()
            for index, root in enumerate(roots, start=1):
                yield (0.2 + 0.8 * index / len(roots), f"Resolving {root.name}...")
                try:
                    entries.append({"name": root.name, "marker": root.marker, "uri": active.root_for(root), "error": None})
                except RootUnavailableError as e:
                    errors.append(str(e))
                    entries.append({"name": root.name, "marker": root.marker, "uri": None, "error": e.reason})

        yield (1.0, "Complete")
        resolved = sum(1 for entry in entries if entry["uri"] is not None)
        result_obj.result = f"Resolved {resolved} of {len(SymbolicRoot)} root(s)"
        result_obj.output = RootsListOutput(errors=errors, warnings=[], roots=entries).model_dump(mode="python")
        result_obj.success = len(errors) == 0

    return StageResult(announce="Listing storage roots...", progress_callback=do_work)
