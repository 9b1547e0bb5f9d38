"""
Parsing of multi-file git diffs.

This package splits `git diff` output (or the patch text returned by code
hosting APIs) into per-file patches, and addresses the lines of each patch
by file line number and by patch position.
"""

from gitdiff.gitdiff_exceptions import GitDiffError, GitDiffOptionError
from gitdiff.gitdiff_line_matcher import DiffLineKind, DiffLineMatch, DiffLineMatcher
from gitdiff.gitdiff_parser import GitDiffParser, GitDiffParserState
from gitdiff.gitdiff_patch import Patch
from gitdiff.gitdiff_patches import Patches
from gitdiff.gitdiff_types import HunkRange, PatchLine, PatchType

__all__ = [
    # Exceptions
    'GitDiffError',
    'GitDiffOptionError',
    # Types
    'PatchType',
    'PatchLine',
    'HunkRange',
    'DiffLineKind',
    'DiffLineMatch',
    # Core classes
    'DiffLineMatcher',
    'Patch',
    'Patches',
    'GitDiffParser',
    'GitDiffParserState',
]
