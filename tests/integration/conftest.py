"""Shared helpers for integration tests."""

import io
from contextlib import redirect_stderr, redirect_stdout


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from appuri.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        rc = main(args)
    return rc, out_buf.getvalue(), err_buf.getvalue()
