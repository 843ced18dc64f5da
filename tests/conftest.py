"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from appuri.api.roots.StaticDirectoryRegistry import StaticDirectoryRegistry
from appuri.api.roots.SymbolicRoot import SymbolicRoot

# Layout of an iOS application container, whose UUID changes between launches
CONTAINER = "file:///var/mobile/Containers/Data/Application/ABC"
BUNDLE = "file:///var/containers/Bundle/Application/XYZ/Demo.app/"

IOS_ROOTS = {
    SymbolicRoot.BUNDLE_RESOURCE: BUNDLE,
    SymbolicRoot.DOCUMENTS: f"{CONTAINER}/Documents/",
    SymbolicRoot.APPLICATION_SUPPORT: f"{CONTAINER}/Library/Application%20Support/",
    SymbolicRoot.CACHES: f"{CONTAINER}/Library/Caches/",
}


def pytest_configure(config):
    for marker in ("unit", "integration", "uri", "roots", "config", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(autouse=True)
def appuri_home(tmp_path: Path, monkeypatch) -> Path:
    """Point APPURI_HOME at an empty per-test directory."""
    home = tmp_path / "appuri_home"
    monkeypatch.setenv("APPURI_HOME", str(home))
    return home


@pytest.fixture
def write_config(appuri_home: Path):
    """Return a helper that writes config.json into APPURI_HOME."""

    def _write(data) -> Path:
        appuri_home.mkdir(parents=True, exist_ok=True)
        path = appuri_home / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def registry() -> StaticDirectoryRegistry:
    """Registry resolving the roots of a fabricated iOS container."""
    return StaticDirectoryRegistry(IOS_ROOTS)


@pytest.fixture
def fs_roots(tmp_path: Path) -> dict[SymbolicRoot, Path]:
    """Real (not created) directories under tmp_path for each root."""
    base = tmp_path / "roots"
    return {
        SymbolicRoot.BUNDLE_RESOURCE: base / "bundle",
        SymbolicRoot.DOCUMENTS: base / "Documents",
        SymbolicRoot.APPLICATION_SUPPORT: base / "Application Support",
        SymbolicRoot.CACHES: base / "Caches",
    }


@pytest.fixture
def fs_config(write_config, fs_roots) -> Path:
    """Config file overriding every root with a tmp_path location."""
    return write_config(
        {
            "roots": {
                "bundle_resource": str(fs_roots[SymbolicRoot.BUNDLE_RESOURCE]),
                "documents": str(fs_roots[SymbolicRoot.DOCUMENTS]),
                "application_support": str(fs_roots[SymbolicRoot.APPLICATION_SUPPORT]),
                "caches": str(fs_roots[SymbolicRoot.CACHES]),
            }
        }
    )
