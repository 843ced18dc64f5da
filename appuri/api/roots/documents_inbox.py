"""Location of the Documents inbox."""

from ...constants import DOCUMENTS_INBOX_NAME
from ..uri.join_root import join_root
from .DirectoryRegistry import DirectoryRegistry
from .SymbolicRoot import SymbolicRoot


def documents_inbox(registry: DirectoryRegistry) -> str:
    """Return the URI of the inbox directory below Documents.

    Other applications place files here for this one to process.
    """
    return join_root(registry.root_for(SymbolicRoot.DOCUMENTS), f"{DOCUMENTS_INBOX_NAME}/")
