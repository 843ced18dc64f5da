"""Check for an absolute file URI."""

from .split_scheme import split_scheme


def is_file_uri(uri: str) -> bool:
    """Return True if ``uri`` is a ``file:`` URI with an absolute path."""
    parts = split_scheme(uri)
    if parts is None:
        return False
    scheme, rest = parts
    return scheme.lower() == "file" and rest.startswith("/")
