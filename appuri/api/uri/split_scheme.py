"""Split a URI into scheme and remainder."""

import re

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def split_scheme(uri: str) -> tuple[str, str] | None:
    """Return ``(scheme, rest)`` for ``uri``, or None if it has no scheme.

    The scheme keeps its original case; ``urllib.parse`` lowercases it,
    which would hide the difference between ``app-bundleResource`` and
    ``app-bundleresource``.
    """
    match = _SCHEME.match(uri)
    if match is None:
        return None
    return match.group(1), uri[match.end():]
