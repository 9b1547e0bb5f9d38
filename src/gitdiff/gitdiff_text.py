"""Text helpers shared by the splitter and the line classifier."""

from typing import List


def split_lines(text: str, keepends: bool = False) -> List[str]:
    """
    Split text into physical lines.

    Only newlines end a line: form feeds and other characters that
    str.splitlines() treats as breaks may legitimately appear inside
    a diff line.  Without keepends a trailing carriage return is also
    removed, so CRLF input reads the same as LF input.

    Args:
        text: Text to split
        keepends: If True, keep each line's terminator

    Returns:
        List of lines; empty for empty text
    """
    lines = text.split('\n')
    last = lines.pop()

    if keepends:
        result = [line + '\n' for line in lines]
        if last:
            result.append(last)

        return result

    # A terminating newline does not start another line
    if last:
        lines.append(last)

    return [line[:-1] if line.endswith('\r') else line for line in lines]


def scrub_line(line: str) -> str:
    """
    Remove sequences that cannot be encoded as UTF-8.

    Text decoded with errors="surrogateescape" carries undecodable bytes
    as lone surrogates; these are dropped rather than raising later.

    Args:
        line: Line to clean

    Returns:
        The line with invalid sequences removed
    """
    if line.isascii():
        return line

    return line.encode('utf-8', errors='ignore').decode('utf-8')
