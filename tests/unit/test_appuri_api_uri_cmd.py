"""Unit tests for the uri commands."""

import pytest

from appuri.api.roots.StaticDirectoryRegistry import StaticDirectoryRegistry
from appuri.api.roots.SymbolicRoot import SymbolicRoot
from appuri.api.uri.cmd_absolute import cmd_absolute
from appuri.api.uri.cmd_classify import cmd_classify
from appuri.api.uri.cmd_persistable import cmd_persistable
from appuri.api.validate_output import validate_output
from appuri.utils.path_to_uri import path_to_uri
from tests.unit.conftest import CONTAINER, run_cmd

pytestmark = pytest.mark.uri


class TestCmdAbsolute:
    def test_persistable_input(self, registry):
        result = run_cmd(cmd_absolute, "app-caches:foo/bar", registry=registry)
        assert result.success
        assert result.output["persistable"] is True
        assert result.output["absolute"] == f"{CONTAINER}/Library/Caches/foo/bar"
        assert result.output["path"] == "/var/mobile/Containers/Data/Application/ABC/Library/Caches/foo/bar"
        assert result.output["errors"] == []
        assert validate_output(cmd_absolute, result.output) == result.output

    def test_file_input(self, registry):
        result = run_cmd(cmd_absolute, "file:///etc/hosts", registry=registry)
        assert result.success
        assert result.output["persistable"] is False
        assert result.output["absolute"] == "file:///etc/hosts"

    def test_not_convertible(self, registry):
        result = run_cmd(cmd_absolute, "http://example.com/x", registry=registry)
        assert not result.success
        assert result.output["absolute"] is None
        assert result.output["path"] is None
        assert "Not a persistable" in result.output["errors"][0]

    def test_root_unavailable_reported(self):
        registry = StaticDirectoryRegistry({SymbolicRoot.CACHES: "file:///c/"})
        result = run_cmd(cmd_absolute, "app-documents:x", registry=registry)
        assert not result.success
        assert "DOCUMENTS" in result.output["errors"][0]

    def test_default_registry_from_config(self, fs_config, fs_roots):
        result = run_cmd(cmd_absolute, "app-caches:a.bin")
        assert result.success
        assert result.output["absolute"] == path_to_uri(fs_roots[SymbolicRoot.CACHES], directory=True) + "a.bin"

    def test_invalid_config_reported(self, write_config):
        write_config("{invalid json")
        result = run_cmd(cmd_absolute, "app-caches:a.bin")
        assert not result.success
        assert "Invalid JSON" in result.output["errors"][0]

    def test_progress_messages(self, registry):
        result = cmd_absolute("app-caches:x", registry=registry)
        progress = list(result.progress_callback(result))
        assert progress[-1] == (1.0, "Complete")
        assert all(0.0 <= fraction <= 1.0 for fraction, _ in progress)


class TestCmdPersistable:
    def test_file_input(self, registry):
        result = run_cmd(cmd_persistable, f"{CONTAINER}/Documents/a.txt", registry=registry)
        assert result.success
        assert result.output["persistable"] == "app-documents:a.txt"
        assert validate_output(cmd_persistable, result.output) == result.output

    def test_outside_roots(self, registry):
        result = run_cmd(cmd_persistable, "file:///etc/hosts", registry=registry)
        assert not result.success
        assert result.output["persistable"] is None
        assert "outside every storage root" in result.output["errors"][0]

    def test_root_unavailable_reported(self):
        registry = StaticDirectoryRegistry({})
        result = run_cmd(cmd_persistable, "file:///x", registry=registry)
        assert not result.success
        assert "BUNDLE_RESOURCE" in result.output["errors"][0]


class TestCmdClassify:
    @pytest.mark.parametrize(
        ("uri", "kind", "root"),
        [
            ("app-caches:foo", "persistable", "app-caches"),
            ("app-bundleResource:", "persistable", "app-bundleResource"),
            ("file:///etc/hosts", "file", None),
            ("http://example.com", "other", None),
            ("app-unknown:foo", "other", None),
        ],
    )
    def test_kinds(self, uri, kind, root):
        result = run_cmd(cmd_classify, uri)
        assert result.success
        assert result.output["kind"] == kind
        assert result.output["root"] == root
