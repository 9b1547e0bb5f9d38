"""Splitting of multi-file git diffs into per-file patches."""

import logging
from dataclasses import dataclass, field
from typing import List

from gitdiff.gitdiff_line_matcher import NO_FILE, DiffLineKind, DiffLineMatch, DiffLineMatcher
from gitdiff.gitdiff_patch import Patch
from gitdiff.gitdiff_patches import Patches
from gitdiff.gitdiff_text import scrub_line, split_lines
from gitdiff.gitdiff_types import PatchType


@dataclass
class GitDiffParserState:
    """Details gathered for the file section currently being parsed."""

    file: str = ""
    original_file: str = ""
    binary: bool = False
    type: PatchType = PatchType.MODIFIED
    body_lines: List[str] = field(default_factory=list)
    capturing: bool = False  # True once a ---/+++ header opens the hunk body

    def has_file_name(self) -> bool:
        """Has a file name been recorded for this section?"""
        return bool(self.file or self.original_file)

    def has_content(self) -> bool:
        """Has anything worth a patch been recorded for this section?"""
        return bool(self.body_lines) or self.has_file_name()

    def to_patch(self, secure_hash: str | None = None) -> Patch:
        """
        Build the patch for this section.

        Args:
            secure_hash: Optional identifier to attach to the patch

        Returns:
            The patch, with its body lines newline-terminated
        """
        return Patch(
            body='\n'.join(self.body_lines) + '\n',
            file=self.file,
            original_file=self.original_file,
            secure_hash=secure_hash,
            binary=self.binary,
            type=self.type
        )


class GitDiffParser:
    """
    Parser for multi-file diffs as produced by `git diff`.

    Parsing is permissive: lines that are not understood are skipped and
    every section that gathered a file name or body is still returned.
    """

    def __init__(self, encoding: str = 'utf-8') -> None:
        """
        Initialize the parser.

        Args:
            encoding: Encoding used to decode diffs supplied as bytes
        """
        self._encoding = encoding
        self._matcher = DiffLineMatcher()
        self._logger = logging.getLogger("GitDiffParser")

    def parse(self, diff_text: str | bytes, secure_hash: str | None = None) -> Patches:
        """
        Parse a diff into one patch per file section.

        Args:
            diff_text: Output of `git diff`, or any text using its headers
            secure_hash: Optional identifier attached to every patch, such as
                the commit the diff was taken from

        Returns:
            Patches in the order their sections appear; empty if none were found
        """
        if isinstance(diff_text, bytes):
            diff_text = diff_text.decode(self._encoding, errors='ignore')

        lines = split_lines(diff_text)
        last_index = len(lines) - 1
        patches = Patches()
        state = GitDiffParserState()

        for index, raw_line in enumerate(lines):
            line = scrub_line(raw_line)
            match = self._matcher.match(line)

            if match.kind == DiffLineKind.SECTION_START:
                if state.has_content():
                    self._emit(patches, state, secure_hash)
                    state = GitDiffParserState()

                state.capturing = False
                continue

            if match.kind == DiffLineKind.BODY:
                if state.capturing:
                    state.body_lines.append(line)

                # Diffs need not end with another "diff" line, so close the last section here
                if state.capturing and state.body_lines and index == last_index:
                    self._emit(patches, state, secure_hash)
                    state = GitDiffParserState()

                continue

            self._apply_header(state, match)

        if state.has_file_name():
            self._emit(patches, state, secure_hash)

        self._logger.debug("Parsed %d patch(es) from %d line(s)", len(patches), len(lines))
        return patches

    def _apply_header(self, state: GitDiffParserState, match: DiffLineMatch) -> None:
        """
        Record what a header line says about the current section.

        Args:
            state: State of the current section (updated in place)
            match: The classified header line
        """
        if match.kind == DiffLineKind.OLD_FILE_HEADER:
            # After a rename the old path is already known
            state.file = state.original_file or match.path
            state.capturing = True
            return

        if match.kind == DiffLineKind.NEW_FILE_HEADER:
            state.file = match.path
            state.capturing = True
            return

        if match.kind == DiffLineKind.RENAME_FROM:
            state.original_file = match.path
            state.type = PatchType.RENAMED
            return

        if match.kind == DiffLineKind.RENAME_TO:
            state.file = match.path
            return

        if match.kind == DiffLineKind.OLD_FILE_MISSING:
            state.type = PatchType.ADDED
            return

        if match.kind == DiffLineKind.NEW_FILE_MISSING:
            state.type = PatchType.DELETED
            return

        if match.kind == DiffLineKind.BINARY:
            self._apply_binary(state, match)

    def _apply_binary(self, state: GitDiffParserState, match: DiffLineMatch) -> None:
        """
        Record a "Binary files ... differ" marker.

        Args:
            state: State of the current section (updated in place)
            match: The classified binary marker
        """
        state.binary = True

        if match.new_path != NO_FILE:
            state.file = self._strip_prefix(match.new_path, 'b/')
            if match.old_path == NO_FILE:
                state.type = PatchType.ADDED

            return

        state.type = PatchType.DELETED
        if not state.file:
            state.file = self._strip_prefix(match.old_path, 'a/')

    def _strip_prefix(self, path: str, prefix: str) -> str:
        if path.startswith(prefix):
            return path[len(prefix):]

        return path

    def _emit(self, patches: Patches, state: GitDiffParserState, secure_hash: str | None) -> None:
        """
        Close the current section and add its patch to the collection.

        Args:
            patches: Collection being built
            state: State of the section being closed
            secure_hash: Optional identifier to attach to the patch
        """
        patch = state.to_patch(secure_hash)
        patches._append(patch)  # pylint: disable=protected-access
        self._logger.debug(
            "Parsed %s%s patch for '%s' (%d body line(s))",
            patch.type.value,
            " binary" if patch.binary else "",
            patch.file,
            len(state.body_lines)
        )
