"""Create a private temporary directory."""

import logging
import tempfile

from ...constants import TEMPORARY_DIRECTORY_PREFIX
from ...utils.path_to_uri import path_to_uri

logger = logging.getLogger(__name__)


def create_temporary_directory() -> str:
    """Create a fresh, uniquely named temporary directory.

    The directory is readable only by the current user and is likely to be
    removed by the OS between runs, so it has no symbolic root. The caller
    owns it and should delete it when done.

    Returns:
        Directory URI with a trailing ``/``
    """
    path = tempfile.mkdtemp(prefix=TEMPORARY_DIRECTORY_PREFIX)
    logger.debug(f"Created temporary directory {path}")
    return path_to_uri(path, directory=True)
