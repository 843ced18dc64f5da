"""Append a relative path to a root URI."""


def join_root(root_uri: str, path: str) -> str:
    """Return ``root_uri`` with ``path`` appended as-is.

    An empty path returns the root unchanged. No ``.``/``..`` or
    percent-escape normalization is applied.
    """
    if not path:
        return root_uri
    if root_uri.endswith("/"):
        return root_uri + path
    return f"{root_uri}/{path}"
