"""Registry resolving symbolic roots from the host platform's conventions."""

import os
import platform
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from ...constants import DEFAULT_APP_NAME
from ...utils.path_to_uri import path_to_uri
from ..uri.is_file_uri import is_file_uri
from .DirectoryRegistry import DirectoryRegistry
from .RootUnavailableError import RootUnavailableError
from .SymbolicRoot import SymbolicRoot


class PlatformDirectoryRegistry(DirectoryRegistry):
    """Resolve roots the way the running operating system lays them out.

    - BUNDLE_RESOURCE: directory of the installed ``bundle_package``
    - DOCUMENTS: the user's documents folder
    - APPLICATION_SUPPORT: per-application data directory
    - CACHES: per-application cache directory

    ``overrides`` maps roots to absolute paths or ``file:`` URIs that take
    precedence over discovery.
    """

    def __init__(
        self,
        app_name: str = DEFAULT_APP_NAME,
        bundle_package: str = DEFAULT_APP_NAME,
        overrides: Mapping[SymbolicRoot, str] | None = None,
        system: str | None = None,
    ):
        super().__init__()
        self.app_name = app_name
        self.bundle_package = bundle_package
        self.overrides = dict(overrides or {})
        self.system = (system or platform.system()).lower()

    def _resolve(self, root: SymbolicRoot) -> str:
        override = self.overrides.get(root)
        if override:
            return self._override_uri(root, override)

        if root is SymbolicRoot.BUNDLE_RESOURCE:
            path = self._bundle_resource_dir()
        elif root is SymbolicRoot.DOCUMENTS:
            path = self._documents_dir()
        elif root is SymbolicRoot.APPLICATION_SUPPORT:
            path = self._application_support_dir()
        elif root is SymbolicRoot.CACHES:
            path = self._caches_dir()
        else:
            raise RootUnavailableError(root, "unsupported root")
        return path_to_uri(path, directory=True)

    def _override_uri(self, root: SymbolicRoot, override: str) -> str:
        if is_file_uri(override):
            return override if override.endswith("/") else override + "/"
        path = Path(override).expanduser()
        if not path.is_absolute():
            raise RootUnavailableError(root, f"override is not an absolute path: {override!r}")
        return path_to_uri(path, directory=True)

    def _home(self, root: SymbolicRoot) -> Path:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)
        try:
            return Path.home()
        except (RuntimeError, KeyError) as e:
            raise RootUnavailableError(root, f"home directory unknown: {e}") from e

    def _env_dir(self, name: str) -> Path | None:
        # XDG base directories must be absolute; relative values are ignored
        value = os.environ.get(name)
        if value and Path(value).is_absolute():
            return Path(value)
        return None

    def _required_env_dir(self, root: SymbolicRoot, name: str) -> Path:
        path = self._env_dir(name)
        if path is None:
            raise RootUnavailableError(root, f"environment variable {name} is not set to an absolute path")
        return path

    def _bundle_resource_dir(self) -> Path:
        root = SymbolicRoot.BUNDLE_RESOURCE
        try:
            location = resources.files(self.bundle_package)
        except (ModuleNotFoundError, TypeError) as e:
            raise RootUnavailableError(root, f"package {self.bundle_package!r} not importable: {e}") from e
        if not isinstance(location, Path):
            raise RootUnavailableError(root, f"package {self.bundle_package!r} is not installed on the filesystem")
        return location

    def _documents_dir(self) -> Path:
        root = SymbolicRoot.DOCUMENTS
        if self.system not in ("darwin", "windows"):
            xdg = self._env_dir("XDG_DOCUMENTS_DIR")
            if xdg is not None:
                return xdg
        return self._home(root) / "Documents"

    def _application_support_dir(self) -> Path:
        root = SymbolicRoot.APPLICATION_SUPPORT
        if self.system == "darwin":
            return self._home(root) / "Library" / "Application Support" / self.app_name
        if self.system == "windows":
            return self._required_env_dir(root, "APPDATA") / self.app_name
        base = self._env_dir("XDG_DATA_HOME") or self._home(root) / ".local" / "share"
        return base / self.app_name

    def _caches_dir(self) -> Path:
        root = SymbolicRoot.CACHES
        if self.system == "darwin":
            return self._home(root) / "Library" / "Caches" / self.app_name
        if self.system == "windows":
            return self._required_env_dir(root, "LOCALAPPDATA") / self.app_name / "Cache"
        base = self._env_dir("XDG_CACHE_HOME") or self._home(root) / ".cache"
        return base / self.app_name
