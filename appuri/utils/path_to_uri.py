"""Convert a filesystem path to a file URI."""

from pathlib import Path


def path_to_uri(path: Path | str, directory: bool = False) -> str:
    """Convert an absolute path to a ``file:`` URI.

    The path is made absolute but not resolved, so symlinked storage
    locations keep the spelling the platform reported.

    Args:
        path: Filesystem path
        directory: Append a trailing ``/`` so the URI denotes a directory

    Returns:
        URI string like 'file:///Users/ww5/Library/Caches/'
    """
    uri = Path(path).expanduser().absolute().as_uri()
    if directory and not uri.endswith("/"):
        uri += "/"
    return uri
