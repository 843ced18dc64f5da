"""Registry backed by a fixed mapping."""

from collections.abc import Mapping

from .DirectoryRegistry import DirectoryRegistry
from .RootUnavailableError import RootUnavailableError
from .SymbolicRoot import SymbolicRoot


class StaticDirectoryRegistry(DirectoryRegistry):
    """Registry whose roots are given up front.

    Keys may be :class:`SymbolicRoot` members or their marker strings.
    Useful for tests and for deployments with fixed storage locations.
    """

    def __init__(self, roots: Mapping[SymbolicRoot | str, str]):
        super().__init__()
        self._mapping: dict[SymbolicRoot, str] = {}
        for key, uri in roots.items():
            root = key if isinstance(key, SymbolicRoot) else SymbolicRoot.from_marker(key)
            if root is None:
                raise ValueError(f"Unknown symbolic root marker: {key!r}")
            self._mapping[root] = uri

    def _resolve(self, root: SymbolicRoot) -> str:
        if root not in self._mapping:
            raise RootUnavailableError(root, "no location configured")
        return self._mapping[root]
