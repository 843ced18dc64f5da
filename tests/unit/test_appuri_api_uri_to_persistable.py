"""Unit tests for appuri.api.uri.to_persistable."""

import pytest

from appuri.api.roots.RootUnavailableError import RootUnavailableError
from appuri.api.roots.StaticDirectoryRegistry import StaticDirectoryRegistry
from appuri.api.roots.SymbolicRoot import SymbolicRoot
from appuri.api.uri.to_absolute import to_absolute
from appuri.api.uri.to_persistable import to_persistable
from tests.unit.conftest import CONTAINER, IOS_ROOTS

pytestmark = pytest.mark.uri


def test_caches_scenario(registry):
    absolute = to_absolute("app-caches:foo/bar", registry)
    assert to_persistable(absolute, registry) == "app-caches:foo/bar"


@pytest.mark.parametrize("root", list(SymbolicRoot))
@pytest.mark.parametrize("path", ["", "a", "a/b/c.txt", "dir/", "with%20space/../x"])
def test_round_trip(registry, root, path):
    persistable = f"{root.marker}:{path}"
    assert to_persistable(to_absolute(persistable, registry), registry) == persistable


@pytest.mark.parametrize("uri", ["app-caches:foo", "app-documents:", "app-bundleResource:x/y"])
def test_persistable_unchanged(registry, uri):
    assert to_persistable(uri, registry) == uri


def test_empty_suffix(registry):
    root = IOS_ROOTS[SymbolicRoot.CACHES]
    persistable = to_persistable(root, registry)
    assert persistable == "app-caches:"
    assert to_absolute(persistable, registry) == root


def test_empty_suffix_root_without_trailing_slash():
    registry = StaticDirectoryRegistry(
        {**IOS_ROOTS, SymbolicRoot.CACHES: f"{CONTAINER}/Library/Caches"}
    )
    root = registry.root_for(SymbolicRoot.CACHES)
    assert to_persistable(root, registry) == "app-caches:"
    assert to_absolute("app-caches:", registry) == root


@pytest.mark.parametrize(
    "uri",
    ["file:///etc/hosts", f"{CONTAINER}/tmp/x", f"{CONTAINER}/Library/Caches2/foo", "http://example.com/x", "app-unknown:foo"],
)
def test_outside_every_root(registry, uri):
    assert to_persistable(uri, registry) is None


def test_prefix_without_segment_boundary_is_not_a_match():
    registry = StaticDirectoryRegistry(
        {
            SymbolicRoot.BUNDLE_RESOURCE: "file:///b/",
            SymbolicRoot.DOCUMENTS: "file:///x/Data2/",
            SymbolicRoot.APPLICATION_SUPPORT: "file:///x/Data",
            SymbolicRoot.CACHES: "file:///c/",
        }
    )
    assert to_persistable("file:///x/Data2/report.txt", registry) == "app-documents:report.txt"
    assert to_persistable("file:///x/Data/report.txt", registry) == "app-appSupport:report.txt"


def test_nested_roots_prefer_most_specific():
    registry = StaticDirectoryRegistry(
        {
            SymbolicRoot.BUNDLE_RESOURCE: "file:///b/",
            SymbolicRoot.DOCUMENTS: "file:///x/Library/Documents/",
            SymbolicRoot.APPLICATION_SUPPORT: "file:///x/Library/",
            SymbolicRoot.CACHES: "file:///c/",
        }
    )
    assert to_persistable("file:///x/Library/Documents/a.txt", registry) == "app-documents:a.txt"
    assert to_persistable("file:///x/Library/Documents/", registry) == "app-documents:"
    assert to_persistable("file:///x/Library/prefs.plist", registry) == "app-appSupport:prefs.plist"
    for path in ("", "a.txt", "sub/b"):
        persistable = f"app-documents:{path}"
        assert to_persistable(to_absolute(persistable, registry), registry) == persistable


def test_identical_roots_use_priority_order():
    shared = "file:///shared/"
    registry = StaticDirectoryRegistry({root: shared for root in SymbolicRoot})
    assert to_persistable("file:///shared/a", registry) == "app-bundleResource:a"

    registry = StaticDirectoryRegistry(
        {
            SymbolicRoot.BUNDLE_RESOURCE: "file:///b/",
            SymbolicRoot.DOCUMENTS: shared,
            SymbolicRoot.APPLICATION_SUPPORT: "file:///s/",
            SymbolicRoot.CACHES: shared,
        }
    )
    assert to_persistable("file:///shared/a", registry) == "app-caches:a"


def test_root_unavailable_propagates():
    registry = StaticDirectoryRegistry({SymbolicRoot.BUNDLE_RESOURCE: "file:///b/"})
    with pytest.raises(RootUnavailableError):
        to_persistable("file:///anything", registry)


@pytest.mark.parametrize("scheme", ["FILE", "File"])
def test_file_scheme_case_insensitive(registry, scheme):
    uri = f"{scheme}:///var/mobile/Containers/Data/Application/ABC/Library/Caches/a"
    assert to_persistable(uri, registry) == "app-caches:a"
