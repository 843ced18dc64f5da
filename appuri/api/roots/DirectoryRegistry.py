"""Base class for registries of symbolic root locations."""

import logging
from abc import ABC, abstractmethod

from ..uri.is_file_uri import is_file_uri
from .RootUnavailableError import RootUnavailableError
from .SymbolicRoot import SymbolicRoot

logger = logging.getLogger(__name__)


class DirectoryRegistry(ABC):
    """Resolves each symbolic root to its current absolute ``file:`` URI.

    Each root is resolved at most once per registry instance. Successful
    lookups are cached and never change afterwards; failed lookups are not
    cached, so they raise again on the next call.

    Subclasses implement :meth:`_resolve` and must not create directories.
    """

    def __init__(self) -> None:
        self._roots: dict[SymbolicRoot, str] = {}

    @abstractmethod
    def _resolve(self, root: SymbolicRoot) -> str:
        """Return the current absolute URI for ``root``.

        Raises:
            RootUnavailableError: If the location cannot be determined
        """

    def root_for(self, root: SymbolicRoot) -> str:
        """Return the absolute ``file:`` URI of ``root``.

        Raises:
            RootUnavailableError: If the location cannot be determined
        """
        cached = self._roots.get(root)
        if cached is not None:
            return cached

        try:
            uri = self._resolve(root)
        except RootUnavailableError as e:
            logger.warning(str(e))
            raise
        if not is_file_uri(uri):
            logger.warning(f"Registry returned a non-file URI for {root.name}: {uri}")
            raise RootUnavailableError(root, f"not an absolute file URI: {uri!r}")

        logger.debug(f"Resolved {root.name} to {uri}")
        self._roots[root] = uri
        return uri

    def snapshot(self) -> dict[SymbolicRoot, str]:
        """Resolve every root and return the mapping."""
        return {root: self.root_for(root) for root in SymbolicRoot}
