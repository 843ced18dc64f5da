"""Unit tests for join_root and match_root."""

import pytest

from appuri.api.uri.join_root import join_root
from appuri.api.uri.match_root import match_root

pytestmark = pytest.mark.uri


class TestJoinRoot:
    def test_directory_root(self):
        assert join_root("file:///a/Caches/", "foo/bar") == "file:///a/Caches/foo/bar"

    def test_root_without_trailing_slash(self):
        assert join_root("file:///a/Caches", "foo") == "file:///a/Caches/foo"

    def test_empty_path_returns_root_exactly(self):
        assert join_root("file:///a/Caches/", "") == "file:///a/Caches/"
        assert join_root("file:///a/Caches", "") == "file:///a/Caches"

    def test_path_kept_verbatim(self):
        assert join_root("file:///a/", "x/../y/./z%20w") == "file:///a/x/../y/./z%20w"


class TestMatchRoot:
    def test_suffix(self):
        assert match_root("file:///a/Caches/foo/bar", "file:///a/Caches/") == "foo/bar"

    def test_root_itself(self):
        assert match_root("file:///a/Caches/", "file:///a/Caches/") == ""
        assert match_root("file:///a/Caches", "file:///a/Caches/") == ""
        assert match_root("file:///a/Caches/", "file:///a/Caches") == ""

    def test_segment_boundary(self):
        assert match_root("file:///a/Caches2/foo", "file:///a/Caches/") is None
        assert match_root("file:///a/Caches2/foo", "file:///a/Caches") is None
        assert match_root("file:///a/Caches2", "file:///a/Caches") is None

    def test_root_without_trailing_slash(self):
        assert match_root("file:///a/Caches/foo", "file:///a/Caches") == "foo"

    def test_outside(self):
        assert match_root("file:///b/foo", "file:///a/") is None

    def test_filesystem_root(self):
        assert match_root("file:///etc/hosts", "file:///") == "etc/hosts"
        assert match_root("file:///", "file:///") == ""

    def test_trailing_slash_suffix_preserved(self):
        assert match_root("file:///a/Caches/dir/", "file:///a/Caches/") == "dir/"

    def test_scheme_case_insensitive(self):
        assert match_root("FILE:///a/Caches/foo", "file:///a/Caches/") == "foo"
        assert match_root("File:///a/Caches", "file:///a/Caches/") == ""
        assert match_root("file:///etc/hosts", "FILE:///") == "etc/hosts"

    def test_path_case_sensitive(self):
        assert match_root("file:///a/caches/foo", "file:///a/Caches/") is None

    def test_other_scheme(self):
        assert match_root("http:///a/Caches/foo", "file:///a/Caches/") is None
        assert match_root("/a/Caches/foo", "file:///a/Caches/") is None
