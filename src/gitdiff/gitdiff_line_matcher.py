"""
Classification of the physical lines of a multi-file git diff.

Each line is matched against the header forms that delimit and describe
file sections.  Patterns are tried in a fixed priority order and the first
one that matches decides the line's kind, so that, for example, a
"--- a/path" header is never mistaken for a removed body line.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple


class DiffLineKind(Enum):
    """Kinds of line found in a multi-file diff."""
    SECTION_START = auto()      # diff --git a/x b/x
    OLD_FILE_HEADER = auto()    # --- a/<path>
    NEW_FILE_HEADER = auto()    # +++ b/<path>
    RENAME_FROM = auto()        # rename from <path>
    RENAME_TO = auto()          # rename to <path>
    OLD_FILE_MISSING = auto()   # --- /dev/null
    NEW_FILE_MISSING = auto()   # +++ /dev/null
    BODY = auto()               # hunk header, context, added, removed or "\ No newline" line
    BINARY = auto()             # Binary files <a> and <b> differ
    OTHER = auto()              # index, mode and similarity lines, free text


NO_FILE = '/dev/null'


@dataclass(frozen=True)
class DiffLineMatch:
    """Result of classifying one diff line."""

    kind: DiffLineKind
    path: str = ""  # Path captured by header lines, right-stripped
    old_path: str = ""  # Old side of a binary marker, including any a/ prefix
    new_path: str = ""  # New side of a binary marker, including any b/ prefix


_LINE_PATTERNS: List[Tuple[DiffLineKind, re.Pattern[str]]] = [
    (DiffLineKind.SECTION_START, re.compile(r'^diff')),
    (DiffLineKind.OLD_FILE_HEADER, re.compile(r'^--- a/(?P<path>.*)')),
    (DiffLineKind.NEW_FILE_HEADER, re.compile(r'^\+\+\+ b/(?P<path>.*)')),
    (DiffLineKind.RENAME_FROM, re.compile(r'^rename from (?P<path>.*)')),
    (DiffLineKind.RENAME_TO, re.compile(r'^rename to (?P<path>.*)')),
    (DiffLineKind.OLD_FILE_MISSING, re.compile(r'^--- /dev/null$')),
    (DiffLineKind.NEW_FILE_MISSING, re.compile(r'^\+\+\+ /dev/null$')),
    (DiffLineKind.BODY, re.compile(r'^[ @+\-\\]')),
    (DiffLineKind.BINARY, re.compile(r'^Binary files (?P<old_path>.*) and (?P<new_path>.*) differ$')),
]


class DiffLineMatcher:
    """Classifies diff lines by their header form."""

    def match(self, line: str) -> DiffLineMatch:
        """
        Classify a single line.

        Args:
            line: Diff line without its terminator

        Returns:
            The kind of line and any paths it carries
        """
        for kind, pattern in _LINE_PATTERNS:
            match = pattern.match(line)
            if not match:
                continue

            groups = match.groupdict()
            if kind == DiffLineKind.BINARY:
                return DiffLineMatch(
                    kind,
                    old_path=groups['old_path'].rstrip(),
                    new_path=groups['new_path'].rstrip()
                )

            return DiffLineMatch(kind, path=groups.get('path', '').rstrip())

        return DiffLineMatch(DiffLineKind.OTHER)
