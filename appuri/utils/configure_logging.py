import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path, level: str = "INFO", file_name: str = "appuri.log") -> None:
    """Configure unified appuri logging.

    Args:
        home: appuri home directory; the log file is written inside it.
        level: Logging level name for the ``appuri`` logger.
        file_name: Log file name under ``home``.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / file_name

    root_logger = logging.getLogger("appuri")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
