"""appuri utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .get_package_version import get_package_version
from .path_to_uri import path_to_uri
from .uri_to_path import uri_to_path

__all__ = [
    "configure_logging",
    "get_package_version",
    "path_to_uri",
    "uri_to_path",
]
