"""Convert a URI to an absolute file URI."""

import re

from ..roots.DirectoryRegistry import DirectoryRegistry
from ..roots.SymbolicRoot import SymbolicRoot
from .is_file_uri import is_file_uri
from .join_root import join_root
from .split_scheme import split_scheme

_QUERY_OR_FRAGMENT = re.compile(r"[?#]")


def to_absolute(uri: str, registry: DirectoryRegistry) -> str | None:
    """Return ``uri`` as an absolute ``file:`` URI.

    - Persistable URIs are resolved against the registry's current root.
    - Absolute file URIs are returned unchanged.
    - Anything else (``http:``, unknown markers) yields None.

    Only the path of a persistable URI is appended to its root; a query
    or fragment is dropped.

    Raises:
        RootUnavailableError: If the registry cannot resolve the root
    """
    parts = split_scheme(uri)
    if parts is None:
        return None

    scheme, rest = parts
    root = SymbolicRoot.from_marker(scheme)
    if root is None:
        return uri if is_file_uri(uri) else None
    path = _QUERY_OR_FRAGMENT.split(rest, maxsplit=1)[0]
    return join_root(registry.root_for(root), path)
