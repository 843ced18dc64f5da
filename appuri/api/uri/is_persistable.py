"""Check for a persistable URI."""

from ..roots.SymbolicRoot import SymbolicRoot
from .split_scheme import split_scheme


def is_persistable(uri: str) -> bool:
    """Return True if the scheme of ``uri`` is exactly one of the root markers.

    Purely syntactic; no registry is consulted.
    """
    parts = split_scheme(uri)
    return parts is not None and SymbolicRoot.from_marker(parts[0]) is not None
