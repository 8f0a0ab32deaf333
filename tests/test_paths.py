"""
Tests for path helpers: normalisation, upward search and monorepo root.
"""

import os

import pytest

from rescript_toolchain.binary.paths import (
    find_file_path_from_project_root,
    get_monorepo_root_from_binary_path,
    normalize_path,
)

from conftest import touch


# ==================== normalize_path Tests ====================

class TestNormalizePath:
    """Tests for normalize_path."""

    def test_none_passes_through(self):
        assert normalize_path(None) is None

    def test_collapses_dot_segments(self):
        assert normalize_path("/a/./b/../c//d") == "/a/c/d"

    @pytest.mark.parametrize("path", ["/a/b", "relative/dir", ".", "/"])
    def test_idempotent(self, path):
        once = normalize_path(path)
        assert normalize_path(once) == once


# ==================== find_file_path_from_project_root Tests ====================

class TestFindFilePathFromProjectRoot:
    """Tests for the upward ancestor search."""

    def test_none_directory(self):
        assert find_file_path_from_project_root(None, "node_modules/pkg") is None

    def test_finds_file_in_ancestor(self, root):
        nested = root / "a" / "b" / "c"
        nested.mkdir(parents=True)
        (root / "a" / "node_modules" / "pkg").mkdir(parents=True)

        result = find_file_path_from_project_root(str(nested), os.path.join("node_modules", "pkg"))
        assert result == os.path.normpath(str(root / "a" / "node_modules" / "pkg"))

    def test_prefers_nearest_ancestor(self, root):
        nested = root / "a" / "b"
        nested.mkdir(parents=True)
        touch(root / "marker.txt")
        touch(root / "a" / "marker.txt")

        result = find_file_path_from_project_root(str(nested), "marker.txt")
        assert result == str(root / "a" / "marker.txt")

    def test_finds_file_in_start_directory(self, root):
        touch(root / "marker.txt")
        assert find_file_path_from_project_root(str(root), "marker.txt") == str(root / "marker.txt")

    def test_absent_everywhere_terminates(self, root):
        nested = root / "a" / "b" / "c"
        nested.mkdir(parents=True)
        name = "definitely-not-here-7f3a1c"
        assert find_file_path_from_project_root(str(nested), name) is None

    def test_trailing_separator(self, root):
        nested = root / "a"
        nested.mkdir()
        touch(root / "marker.txt")
        result = find_file_path_from_project_root(str(nested) + os.sep, "marker.txt")
        assert result == str(root / "marker.txt")

    def test_relative_start_terminates(self, root, monkeypatch):
        monkeypatch.chdir(root)
        assert find_file_path_from_project_root(".", "definitely-not-here-7f3a1c") is None
        assert find_file_path_from_project_root("sub", "definitely-not-here-7f3a1c") is None

    def test_relative_start_found(self, root, monkeypatch):
        (root / "sub").mkdir()
        touch(root / "marker.txt")
        monkeypatch.chdir(root)
        assert find_file_path_from_project_root("sub", "marker.txt") == "marker.txt"


# ==================== get_monorepo_root_from_binary_path Tests ====================

class TestMonorepoRoot:
    """Tests for get_monorepo_root_from_binary_path."""

    def test_bin_link(self):
        assert get_monorepo_root_from_binary_path("/mono/node_modules/.bin/rescript") == os.path.normpath("/mono")

    def test_no_node_modules(self):
        assert get_monorepo_root_from_binary_path("/standalone/rescript") is None

    def test_none(self):
        assert get_monorepo_root_from_binary_path(None) is None

    def test_first_node_modules_wins(self):
        path = "/mono/node_modules/rescript/node_modules/@rescript/linux-x64/bin/bsc.exe"
        assert get_monorepo_root_from_binary_path(path) == "/mono"

    def test_backslash_separators(self):
        path = "C:\\mono\\node_modules\\.bin\\rescript"
        assert get_monorepo_root_from_binary_path(path) == os.path.normpath("C:\\mono")

    def test_repeated_separators(self):
        assert get_monorepo_root_from_binary_path("/mono//node_modules//rescript") == "/mono"

    def test_marker_must_be_whole_segment(self):
        assert get_monorepo_root_from_binary_path("/mono/my_node_modules/rescript") is None
        assert get_monorepo_root_from_binary_path("/mono/node_modules_old/rescript") is None

    def test_case_sensitive(self):
        assert get_monorepo_root_from_binary_path("/mono/Node_Modules/.bin/rescript") is None

    def test_marker_needs_trailing_separator(self):
        assert get_monorepo_root_from_binary_path("/mono/node_modules") is None
