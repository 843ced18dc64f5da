"""Unit test fixtures.

Most helpers live in tests/conftest.py; this re-exports the ones unit
tests import directly.
"""

from tests.conftest import CONTAINER, IOS_ROOTS, run_cmd

__all__ = ["CONTAINER", "IOS_ROOTS", "run_cmd"]
