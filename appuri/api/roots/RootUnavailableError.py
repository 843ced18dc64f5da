"""Raised when the platform cannot resolve a symbolic root."""

from .SymbolicRoot import SymbolicRoot


class RootUnavailableError(RuntimeError):
    """The current absolute location of a symbolic root could not be resolved.

    Never substitute a guessed path for this: every persistable URI derived
    from a wrong root would be silently wrong as well.
    """

    def __init__(self, root: SymbolicRoot, reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot resolve {root.name} ({root.marker}): {reason}")
