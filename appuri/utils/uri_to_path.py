"""Convert a file URI to a filesystem path."""

from pathlib import Path
from urllib.parse import unquote, urlsplit


def uri_to_path(uri: str) -> Path:
    """Convert a ``file:`` URI to a Path.

    Args:
        uri: URI string like 'file:///Users/ww5/file.txt'

    Returns:
        Path object with percent-escapes decoded

    Raises:
        ValueError: If the URI is not a file URI
    """
    parts = urlsplit(uri)
    if parts.scheme.lower() != "file":
        raise ValueError(f"Cannot extract local path from non-file URI: {uri}")
    return Path(unquote(parts.path))
