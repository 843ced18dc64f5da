"""Build the platform registry described by the configuration."""

from ..config.AppUriConfig import AppUriConfig
from .DirectoryRegistry import DirectoryRegistry
from .PlatformDirectoryRegistry import PlatformDirectoryRegistry


def load_registry(config: AppUriConfig | None = None) -> DirectoryRegistry:
    """Return a :class:`PlatformDirectoryRegistry` for ``config``.

    Loads the configuration from disk when none is given.
    """
    if config is None:
        config = AppUriConfig.load()
    return PlatformDirectoryRegistry(
        app_name=config.app_name,
        bundle_package=config.bundle_package,
        overrides=config.roots.overrides(),
    )
