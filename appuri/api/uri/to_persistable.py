"""Convert a URI to a persistable URI."""

from ..roots.DirectoryRegistry import DirectoryRegistry
from ..roots.SymbolicRoot import SymbolicRoot
from .is_file_uri import is_file_uri
from .is_persistable import is_persistable
from .match_root import match_root


def to_persistable(uri: str, registry: DirectoryRegistry) -> str | None:
    """Return ``uri`` as a persistable ``<marker>:<path>`` URI.

    Persistable URIs are returned unchanged. File URIs are tested against
    every root in :meth:`SymbolicRoot.priority` order; the most specific
    matching root wins, and roots of equal length go to the earlier one.
    Returns None for URIs outside every root and for non-file URIs.

    Raises:
        RootUnavailableError: If the registry cannot resolve a root
    """
    if is_persistable(uri):
        return uri
    if not is_file_uri(uri):
        return None

    best: tuple[SymbolicRoot, str, int] | None = None
    for root in SymbolicRoot.priority():
        root_uri = registry.root_for(root)
        suffix = match_root(uri, root_uri)
        if suffix is None:
            continue
        depth = len(root_uri.rstrip("/"))
        if best is None or depth > best[2]:
            best = (root, suffix, depth)

    if best is None:
        return None
    root, suffix, _ = best
    return f"{root.marker}:{suffix}"
