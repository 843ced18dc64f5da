from dataclasses import dataclass

from ..roots.DirectoryRegistry import DirectoryRegistry
from ..roots.SymbolicRoot import SymbolicRoot
from .join_root import join_root
from .split_scheme import split_scheme
from .to_absolute import to_absolute
from .to_persistable import to_persistable


@dataclass(frozen=True)
class PersistableURI:
    """Strongly typed persistable URI value object.

    Holds a ``<marker>:<relative-path>`` string whose marker is one of the
    :class:`SymbolicRoot` tokens. Unlike a plain string it cannot be passed
    by mistake to code expecting a usable file URI.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("PersistableURI value must be a string")
        parts = split_scheme(self.value)
        if parts is None or SymbolicRoot.from_marker(parts[0]) is None:
            raise ValueError(f"Invalid persistable URI (unknown root marker): {self.value}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"PersistableURI('{self.value}')"

    @classmethod
    def for_root(cls, root: SymbolicRoot, path: str = "") -> "PersistableURI":
        """Create a persistable URI for ``path`` below ``root``."""
        return cls(f"{root.marker}:{path}")

    @classmethod
    def from_uri(cls, uri: str, registry: DirectoryRegistry) -> "PersistableURI | None":
        """Create from a file or persistable URI; None if outside every root."""
        persistable = to_persistable(uri, registry)
        return cls(persistable) if persistable is not None else None

    @property
    def root(self) -> SymbolicRoot:
        """Symbolic root this URI is relative to."""
        root = SymbolicRoot.from_marker(self.value.split(":", 1)[0])
        if root is None:
            raise ValueError(f"Invalid persistable URI (unknown root marker): {self.value}")
        return root

    @property
    def path(self) -> str:
        """Relative path below the root (may be empty)."""
        return self.value.split(":", 1)[1]

    def joinpath(self, *parts: str) -> "PersistableURI":
        """Return a new URI with ``parts`` appended as path segments."""
        path = self.path
        for part in parts:
            path = join_root(path, part.strip("/")) if path else part.strip("/")
        return PersistableURI.for_root(self.root, path)

    def to_file_uri(self, registry: DirectoryRegistry) -> str:
        """Return the absolute file URI for the current run.

        Raises:
            RootUnavailableError: If the registry cannot resolve the root
        """
        absolute = to_absolute(self.value, registry)
        if absolute is None:
            raise ValueError(f"Invalid persistable URI (unknown root marker): {self.value}")
        return absolute
