"""API module for appuri.

Functions defined here serve as the single source of truth for the CLI commands
and for library callers.
"""

__all__ = []
