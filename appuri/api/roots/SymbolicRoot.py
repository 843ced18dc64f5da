"""Symbolic storage roots."""

from enum import Enum


class SymbolicRoot(Enum):
    """Standard storage locations whose absolute path may change between runs.

    The value of each member is the marker token used as the scheme of a
    persistable URI.
    """

    # Read-only, installed with the application
    BUNDLE_RESOURCE = "app-bundleResource"
    # User-visible documents; backed up
    DOCUMENTS = "app-documents"
    # Application-owned data; backed up, preserved by the OS
    APPLICATION_SUPPORT = "app-appSupport"
    # Regenerable data; not backed up, may be purged between runs
    CACHES = "app-caches"

    @property
    def marker(self) -> str:
        """Marker token (persistable URI scheme) for this root."""
        return self.value

    @classmethod
    def from_marker(cls, marker: str) -> "SymbolicRoot | None":
        """Return the root whose marker is exactly ``marker``, or None."""
        for root in cls:
            if root.value == marker:
                return root
        return None

    @classmethod
    def priority(cls) -> tuple["SymbolicRoot", ...]:
        """Order in which absolute URIs are tested against the roots."""
        return (cls.BUNDLE_RESOURCE, cls.APPLICATION_SUPPORT, cls.CACHES, cls.DOCUMENTS)
