"""Match an absolute URI against a root URI."""

from .split_scheme import split_scheme


def match_root(uri: str, root_uri: str) -> str | None:
    """Return the suffix of ``uri`` below ``root_uri``, or None if not below it.

    Matching happens on path-segment boundaries: ``.../Caches2/x`` is not
    below ``.../Caches``. A URI equal to the root, with or without its
    trailing ``/``, yields the empty suffix. Schemes compare
    case-insensitively, so ``FILE:///a/x`` is below ``file:///a/``.
    """
    uri_parts = split_scheme(uri)
    root_parts = split_scheme(root_uri)
    if uri_parts is None or root_parts is None:
        return None
    if uri_parts[0].lower() != root_parts[0].lower():
        return None

    path, root_path = uri_parts[1], root_parts[1]
    base = root_path.rstrip("/")
    if base:
        if path == base or path == root_path:
            return ""
        prefix = base + "/"
    else:
        # file:/// keeps its slashes
        prefix = root_path
        if path == prefix:
            return ""
    if path.startswith(prefix):
        return path[len(prefix):]
    return None
