"""
A single file's change within a git diff.

A patch's body is the hunk text for one file, as found in `git diff` output
or in the "patch" field GitHub returns for pull request and commit files:

    @@ -11,7 +11,7 @@ def valid?

       def run
         api.create_pending_status(*api_params, 'Hound is working...')
    -    @style_guide.check(pull_request_additions)
    +    @style_guide.check(api.pull_request_files(@pull_request))
         build = repo.builds.create!(violations: @style_guide.violations)
         update_api_status(build)
       end

Lines of the body are addressed two ways: by their line number in the old
or new version of the file, and by their patch position, the zero-based
index of the line within the body that review tools use to anchor inline
comments.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping

from gitdiff.gitdiff_exceptions import GitDiffOptionError
from gitdiff.gitdiff_text import split_lines
from gitdiff.gitdiff_types import HunkRange, PatchLine, PatchType


_OPTION_NAMES = ('file', 'original_file', 'secure_hash', 'binary', 'type')


@dataclass(frozen=True)
class Patch:
    """One file's change within a diff."""

    body: str = ""
    file: str = ""  # Current path; the old path for deleted files
    original_file: str = ""  # Path before a rename, empty otherwise
    secure_hash: str | None = None  # Caller-supplied commit or content identifier
    binary: bool = False
    type: PatchType = PatchType.MODIFIED

    @classmethod
    def from_options(cls, body: str | None, options: Mapping[str, Any]) -> 'Patch':
        """
        Build a patch from a string-keyed mapping such as a decoded API payload.

        Args:
            body: Patch body, or None for an empty body
            options: Any of "file", "original_file", "secure_hash", "binary"
                and "type"; "type" may be a PatchType or its string value

        Returns:
            The new patch

        Raises:
            GitDiffOptionError: If an option name or patch type is not recognized
        """
        unknown = sorted(set(options) - set(_OPTION_NAMES))
        if unknown:
            raise GitDiffOptionError(
                f"Unknown patch options: {', '.join(unknown)}",
                {'received': unknown, 'expected': list(_OPTION_NAMES)}
            )

        patch_type = options.get('type') or PatchType.MODIFIED
        if not isinstance(patch_type, PatchType):
            patch_type = PatchType.from_name(str(patch_type))

        return cls(
            body=body or "",
            file=options.get('file') or "",
            original_file=options.get('original_file') or "",
            secure_hash=options.get('secure_hash'),
            binary=bool(options.get('binary', False)),
            type=patch_type
        )

    def iter_changed_lines(self) -> Iterator[PatchLine]:
        """
        Walk the body from the new file's point of view.

        Yields:
            Added lines, numbered by their position in the new file
        """
        line_number = 0

        for patch_position, content in enumerate(self._lines()):
            hunk_range = HunkRange.parse(content)
            if hunk_range is not None:
                line_number = hunk_range.new_start
                continue

            # "++" is a stray "+++" header, not an addition
            if content.startswith('+') and not content.startswith('++'):
                yield PatchLine(content, line_number, patch_position)
                line_number += 1
                continue

            # Removed lines don't exist in the new file
            if not content.startswith('-'):
                line_number += 1

    def changed_lines(self) -> List[PatchLine]:
        """
        Get the added lines of the body.

        Returns:
            Added lines in body order
        """
        return list(self.iter_changed_lines())

    def iter_removed_lines(self) -> Iterator[PatchLine]:
        """
        Walk the body from the old file's point of view.

        Yields:
            Removed lines, numbered by their position in the old file
        """
        line_number = 0

        for patch_position, content in enumerate(self._lines()):
            hunk_range = HunkRange.parse(content)
            if hunk_range is not None:
                line_number = hunk_range.old_start
                continue

            if content.startswith('-'):
                yield PatchLine(content, line_number, patch_position)
                line_number += 1
                continue

            # Context lines; an empty line is a context line that lost its space
            if not content or content[0].isspace():
                line_number += 1

    def removed_lines(self) -> List[PatchLine]:
        """
        Get the removed lines of the body.

        Returns:
            Removed lines in body order
        """
        return list(self.iter_removed_lines())

    def changed_line_numbers(self) -> List[int]:
        """
        Get the new-file line numbers of the added lines.

        Returns:
            Line numbers in body order
        """
        return [line.number for line in self.iter_changed_lines()]

    def find_patch_position_by_line_number(self, line_number: int) -> int | None:
        """
        Find where an added line sits in the body.

        Args:
            line_number: Line number in the new file

        Returns:
            Patch position of the first added line with that number, or None
            if no added line has it
        """
        for line in self.iter_changed_lines():
            if line.number == line_number:
                return line.patch_position

        return None

    def hunk_ranges(self) -> List[HunkRange]:
        """
        Get the ranges declared by the body's hunk headers.

        Returns:
            Ranges in body order
        """
        ranges = []
        for content in self._lines():
            hunk_range = HunkRange.parse(content)
            if hunk_range is not None:
                ranges.append(hunk_range)

        return ranges

    def diff_lines(self) -> List[str]:
        """
        Get the physical lines of the body, terminators included.

        Returns:
            Lines exactly as they appear in the body
        """
        return split_lines(self.body, keepends=True)

    def is_renamed(self) -> bool:
        """Is this patch a rename?"""
        return self.type == PatchType.RENAMED

    def is_added(self) -> bool:
        """Does this patch create its file?"""
        return self.type == PatchType.ADDED

    def is_deleted(self) -> bool:
        """Does this patch delete its file?"""
        return self.type == PatchType.DELETED

    def is_modified(self) -> bool:
        """Does this patch modify its file in place?"""
        return self.type == PatchType.MODIFIED

    def is_binary(self) -> bool:
        """Is this a binary patch?"""
        return self.binary

    def _lines(self) -> List[str]:
        return split_lines(self.body)
