"""Shared types for parsed git diffs."""

import re
from dataclasses import dataclass
from enum import Enum

from gitdiff.gitdiff_exceptions import GitDiffOptionError


class PatchType(Enum):
    """Kind of change a patch makes to its file."""
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"

    @classmethod
    def from_name(cls, name: str) -> 'PatchType':
        """
        Look up a patch type by its string value.

        Args:
            name: One of "modified", "added", "deleted" or "renamed"

        Returns:
            The matching patch type

        Raises:
            GitDiffOptionError: If the name is not a known patch type
        """
        try:
            return cls(name)

        except ValueError as e:
            raise GitDiffOptionError(
                f"Unknown patch type: {name!r}",
                {'received': name, 'expected': [t.value for t in cls]}
            ) from e


@dataclass(frozen=True)
class PatchLine:
    """A single line of a patch body."""

    content: str  # Raw line including its marker character, without the line terminator
    number: int  # Line number in the new file (added lines) or old file (removed lines)
    patch_position: int  # Zero-based index of the line within the patch body


# @@ -old_start[,old_count] +new_start[,new_count] @@ optional section heading
_HUNK_RANGE_RE = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))?(?: @@ ?(.*))?')


@dataclass(frozen=True)
class HunkRange:
    """Line ranges declared by a hunk header."""

    old_start: int  # Starting line number in original file (1-indexed)
    old_count: int  # Number of lines in original file
    new_start: int  # Starting line number in new file (1-indexed)
    new_count: int  # Number of lines in new file
    heading: str = ""  # Text after the closing @@, usually the enclosing function

    @classmethod
    def parse(cls, line: str) -> 'HunkRange | None':
        """
        Parse a hunk header line.

        Args:
            line: A line that may be a hunk header

        Returns:
            The parsed range, or None if the line is not a hunk header
        """
        match = _HUNK_RANGE_RE.match(line)
        if not match:
            return None

        old_count = int(match.group(2)) if match.group(2) else 1
        new_count = int(match.group(4)) if match.group(4) else 1
        return cls(
            old_start=int(match.group(1)),
            old_count=old_count,
            new_start=int(match.group(3)),
            new_count=new_count,
            heading=match.group(5) or ""
        )
