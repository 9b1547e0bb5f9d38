"""Tests for gitdiff data types."""

import dataclasses

import pytest

from gitdiff.gitdiff_exceptions import GitDiffOptionError
from gitdiff.gitdiff_types import HunkRange, PatchLine, PatchType


class TestPatchType:
    """Test PatchType enum."""

    def test_values(self):
        """Test the string value of each patch type."""
        assert PatchType.MODIFIED.value == "modified"
        assert PatchType.ADDED.value == "added"
        assert PatchType.DELETED.value == "deleted"
        assert PatchType.RENAMED.value == "renamed"

    def test_from_name(self):
        """Test looking up patch types by name."""
        assert PatchType.from_name("added") is PatchType.ADDED
        assert PatchType.from_name("renamed") is PatchType.RENAMED

    def test_from_name_unknown(self):
        """Test that unknown names raise an option error."""
        with pytest.raises(GitDiffOptionError, match="Unknown patch type") as exc_info:
            PatchType.from_name("copied")

        assert exc_info.value.error_details['received'] == "copied"
        assert "modified" in exc_info.value.error_details['expected']

    def test_from_name_is_case_sensitive(self):
        """Test that names must match exactly."""
        with pytest.raises(GitDiffOptionError):
            PatchType.from_name("Added")


class TestPatchLine:
    """Test PatchLine dataclass."""

    def test_create(self):
        """Test creating a patch line."""
        line = PatchLine("+new content", 14, 5)
        assert line.content == "+new content"
        assert line.number == 14
        assert line.patch_position == 5

    def test_equality(self):
        """Test PatchLine equality."""
        assert PatchLine("+a", 1, 1) == PatchLine("+a", 1, 1)
        assert PatchLine("+a", 1, 1) != PatchLine("+a", 2, 1)
        assert PatchLine("+a", 1, 1) != PatchLine("+a", 1, 2)

    def test_immutable(self):
        """Test that patch lines cannot be changed."""
        line = PatchLine("-old", 3, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.number = 4  # type: ignore[misc]


class TestHunkRange:
    """Test hunk header parsing."""

    def test_parse_full_header(self):
        """Test parsing a header with counts and a section heading."""
        hunk_range = HunkRange.parse("@@ -11,7 +12,8 @@ def valid?")
        assert hunk_range == HunkRange(11, 7, 12, 8, "def valid?")

    def test_parse_without_heading(self):
        """Test parsing a header with no section heading."""
        hunk_range = HunkRange.parse("@@ -1,3 +1,4 @@")
        assert hunk_range == HunkRange(1, 3, 1, 4, "")

    def test_parse_implicit_counts(self):
        """Test that missing counts default to one."""
        hunk_range = HunkRange.parse("@@ -10 +10 @@")
        assert hunk_range is not None
        assert hunk_range.old_count == 1
        assert hunk_range.new_count == 1

    def test_parse_new_file(self):
        """Test parsing the header of a newly added file."""
        hunk_range = HunkRange.parse("@@ -0,0 +1,2 @@")
        assert hunk_range == HunkRange(0, 0, 1, 2)

    def test_parse_unterminated_header(self):
        """Test that the closing @@ is not required."""
        hunk_range = HunkRange.parse("@@ -5,2 +6,2")
        assert hunk_range == HunkRange(5, 2, 6, 2, "")

    def test_parse_not_a_header(self):
        """Test that other lines are not hunk headers."""
        assert HunkRange.parse("@@ invalid header @@") is None
        assert HunkRange.parse(" @@ -1,1 +1,1 @@") is None
        assert HunkRange.parse("+@@ -1,1 +1,1 @@") is None
        assert HunkRange.parse("") is None
