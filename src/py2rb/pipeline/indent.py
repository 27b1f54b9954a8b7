# topmark:header:start
#
#   project      : Py2Rb
#   file         : indent.py
#   file_relpath : src/py2rb/pipeline/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation analyzer: measure leading whitespace and split it off a raw line."""

from __future__ import annotations

import re
from typing import Final

TAB_STOP: Final[int] = 8

_LEADING_WS_RE: Final[re.Pattern[str]] = re.compile(r"^([ \t\f\v]*)(.*)$", re.DOTALL)


def measure_indent_width(whitespace: str) -> int:
    """Return the column width of a leading-whitespace run.

    A tab advances to the next multiple of `TAB_STOP`; any other character
    advances by one column.

    Args:
        whitespace (str): The leading whitespace of a line.

    Returns:
        int: The column reached after the whitespace (0 for an empty string).
    """
    width: int = 0
    for ch in whitespace:
        if ch == "\t":
            width = (width // TAB_STOP + 1) * TAB_STOP
        else:
            width += 1
    return width


def split_indent(raw: str) -> tuple[str, str]:
    """Split a raw line into its leading whitespace and its right-trimmed remainder.

    Args:
        raw (str): A physical input line, with or without its line terminator.

    Returns:
        tuple[str, str]: ``(leading_ws, remainder)``.
    """
    match: re.Match[str] | None = _LEADING_WS_RE.match(raw)
    # The pattern matches any string.
    assert match is not None
    return match.group(1), match.group(2).rstrip()
