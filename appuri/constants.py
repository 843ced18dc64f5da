"""Shared constants for appuri."""

APPURI_HOME_EXT = ".appuri"  # user-level state/config directory suffix

APPURI_HOME_DISPLAY = f"~/{APPURI_HOME_EXT}"  # user-readable path hint

APPURI_HOME_ENV = "APPURI_HOME"

CONFIG_FILE_NAME = "config.json"

DEFAULT_APP_NAME = "appuri"

# Subdirectory of the Documents root where other apps drop files
DOCUMENTS_INBOX_NAME = "Inbox"

TEMPORARY_DIRECTORY_PREFIX = "appuri-"

DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
