"""appuri - persistable URIs for platform storage locations.

Absolute ``file:`` URIs into the standard storage directories (bundle
resources, documents, application support, caches) are only valid for the
current run. Persistable URIs (``app-caches:foo/bar``) name the symbolic root
instead, and are resolved against a :class:`DirectoryRegistry` when needed.
"""

from .api.roots.DirectoryRegistry import DirectoryRegistry
from .api.roots.PlatformDirectoryRegistry import PlatformDirectoryRegistry
from .api.roots.RootUnavailableError import RootUnavailableError
from .api.roots.StaticDirectoryRegistry import StaticDirectoryRegistry
from .api.roots.SymbolicRoot import SymbolicRoot
from .api.roots.create_temporary_directory import create_temporary_directory
from .api.roots.documents_inbox import documents_inbox
from .api.uri.PersistableURI import PersistableURI
from .api.uri.is_persistable import is_persistable
from .api.uri.to_absolute import to_absolute
from .api.uri.to_persistable import to_persistable

__all__ = [
    "DirectoryRegistry",
    "PersistableURI",
    "PlatformDirectoryRegistry",
    "RootUnavailableError",
    "StaticDirectoryRegistry",
    "SymbolicRoot",
    "create_temporary_directory",
    "documents_inbox",
    "is_persistable",
    "to_absolute",
    "to_persistable",
]
