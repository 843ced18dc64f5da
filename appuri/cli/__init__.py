"""CLI - main entry point."""

import logging
import sys

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from appuri.api.config.AppUriConfig import AppUriConfig
    from appuri.api.config.get_home_dir import get_home_dir
    from appuri.cli._create_app import _create_app
    from appuri.utils.configure_logging import configure_logging
    from appuri.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"appuri {get_package_version()}")
        return 0

    try:
        log_config = AppUriConfig.load().log
        configure_logging(get_home_dir(), log_config.level, log_config.file)
    except (ValueError, OSError) as e:
        # Commands report config errors themselves
        typer.echo(f"Warning: logging not configured: {e}", err=True)

    app = _create_app()
    try:
        app(argv)
    except SystemExit as e:  # Typer/Click and the stage runner always exit
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unhandled error")
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
