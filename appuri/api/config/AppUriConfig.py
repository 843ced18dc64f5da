"""Top-level appuri configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from ...constants import DEFAULT_APP_NAME
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .RootsConfig import RootsConfig


class AppUriConfig(BaseModel):
    """Top-level configuration for appuri."""

    model_config = ConfigDict(extra="forbid")

    app_name: str = Field(DEFAULT_APP_NAME, min_length=1, description="Application directory name")
    bundle_package: str = Field(DEFAULT_APP_NAME, min_length=1, description="Package whose directory holds bundle resources")
    roots: RootsConfig = Field(default_factory=RootsConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return get_config_path()

    @classmethod
    def load(cls) -> "AppUriConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except (ValidationError, TypeError) as e:
            if isinstance(e, ValidationError):
                error_list = e.errors() or [{"msg": str(e), "loc": ()}]
                first = error_list[0]
                loc = first.get("loc", ())
                field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
                error_msg = first.get("msg", str(e))
                detail = f"{field}: {error_msg}" if field else error_msg
            else:
                detail = f"top-level value must be an object: {e}"
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary for serialization."""
        return {
            "app_name": self.app_name,
            "bundle_package": self.bundle_package,
            "roots": self.roots.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
