"""Tests for path normalization and ancestor checks."""

import pytest

from zoneguard.domain import paths


class TestNormalize:
    """Tests for normalize()."""

    def test_relative_is_joined_onto_base(self):
        assert paths.normalize("/src/ui", "../data/db.x") == "/src/data/db.x"

    def test_absolute_ignores_base(self):
        assert paths.normalize("/src/ui", "/src/shared/util.x") == "/src/shared/util.x"

    def test_dot_segments_are_collapsed(self):
        assert paths.normalize("/a", "./b/./c/../d") == "/a/b/d"

    def test_backslashes_become_forward_slashes(self):
        assert paths.normalize("/a", "b\\c\\d.x") == "/a/b/c/d.x"

    def test_windows_drive_is_absolute(self):
        assert paths.normalize("/ignored", "C:\\src\\ui\\..\\core") == "C:/src/core"

    def test_repeated_separators_collapse(self):
        assert paths.normalize("//a//", "b///c") == "/a/b/c"

    def test_trailing_separator_dropped(self):
        assert paths.normalize("/", "src/ui/") == "/src/ui"

    def test_dotdot_above_root_stays_at_root(self):
        assert paths.normalize("/a", "../../../b") == "/b"

    def test_dotdot_above_drive_root_stays_at_drive_root(self):
        assert paths.normalize("C:/a", "../../x") == "C:/x"

    def test_drive_root_is_kept(self):
        assert paths.normalize("/ignored", "C:\\") == "C:/"

    def test_bare_specifier_joins_like_a_path(self):
        """Package names are not resolved, only joined."""
        assert paths.normalize("/src/ui", "react") == "/src/ui/react"


class TestIsAncestorOrSelf:
    """Tests for the separator-aware prefix check."""

    def test_equal_paths(self):
        assert paths.is_ancestor_or_self("/src/ui", "/src/ui") is True

    def test_nested_path(self):
        assert paths.is_ancestor_or_self("/src/ui", "/src/ui/App.x") is True

    def test_deeply_nested_path(self):
        assert paths.is_ancestor_or_self("/src", "/src/a/b/c/d.x") is True

    def test_sibling_with_common_prefix_is_not_nested(self):
        assert paths.is_ancestor_or_self("/src/com", "/src/common/x") is False

    def test_hyphenated_sibling_is_not_nested(self):
        assert paths.is_ancestor_or_self("/foo", "/foo-bar") is False

    def test_descendant_is_not_ancestor(self):
        assert paths.is_ancestor_or_self("/src/ui/App.x", "/src/ui") is False

    def test_filesystem_root_contains_everything(self):
        assert paths.is_ancestor_or_self("/", "/anything/at/all") is True

    def test_unrelated_paths(self):
        assert paths.is_ancestor_or_self("/src/ui", "/lib/ui") is False

    @pytest.mark.parametrize(
        "root,target,expected",
        [
            ("/r", "/r", True),
            ("/r", "/r/x", True),
            ("/r", "/rx", False),
            ("/r/", "/r/x", True),
        ],
    )
    def test_boundary_table(self, root, target, expected):
        assert paths.is_ancestor_or_self(root, target) is expected


class TestHelpers:
    """Tests for basename/dirname/relative_to."""

    def test_basename_ignores_directories(self):
        assert paths.basename("/a/secret/b/x.ts") == "x.ts"

    def test_basename_handles_backslashes(self):
        assert paths.basename("C:\\a\\b\\secret.ts") == "secret.ts"

    def test_dirname(self):
        assert paths.dirname("/a/b/x.private.ts") == "/a/b"

    def test_relative_to_inside_base(self):
        assert paths.relative_to("/repo", "/repo/src/data/db.x") == "src/data/db.x"

    def test_relative_to_outside_base_unchanged(self):
        assert paths.relative_to("/repo", "/elsewhere/db.x") == "/elsewhere/db.x"

    def test_relative_to_base_itself(self):
        assert paths.relative_to("/repo", "/repo") == "."

    def test_is_absolute(self):
        assert paths.is_absolute("/a") is True
        assert paths.is_absolute("C:\\a") is True
        assert paths.is_absolute("a/b") is False
