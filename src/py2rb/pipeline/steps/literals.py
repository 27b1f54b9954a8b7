# topmark:header:start
#
#   project      : Py2Rb
#   file         : literals.py
#   file_relpath : src/py2rb/pipeline/steps/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal rewrite steps: raw strings and ``%`` string formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .base import RewriteStep

if TYPE_CHECKING:
    from py2rb.pipeline.context import RewriteState

# r'...' or r"..." (non-greedy up to the matching quote)
RAW_STRING_RE: Final[re.Pattern[str]] = re.compile(r"""\br(['"])(.*?)\1""")

# "fmt" % (   and   'fmt' % (
FORMAT_DOUBLE_RE: Final[re.Pattern[str]] = re.compile(r'("[^"]*")\s*%\s*\(')
FORMAT_SINGLE_RE: Final[re.Pattern[str]] = re.compile(r"('[^']*')\s*%\s*\(")


@dataclass
class RawStringStep(RewriteStep):
    """Turn raw string literals into regular-expression literals (``r'a+'`` -> ``/a+/``)."""

    name: str = "raw_string"

    def rewrite(self, state: RewriteState) -> str:
        """Replace raw string literals with regexp literals."""
        return RAW_STRING_RE.sub(r"/\2/", state.text)


@dataclass
class FormatStep(RewriteStep):
    """Turn ``"fmt" % (args)`` into ``sprintf("fmt", args)``.

    Only the tuple form is recognized; ``"fmt" % value`` is left alone.
    """

    name: str = "format"

    def rewrite(self, state: RewriteState) -> str:
        """Replace tuple formatting with a `sprintf` call."""
        text: str = FORMAT_DOUBLE_RE.sub(r"sprintf(\1, ", state.text)
        return FORMAT_SINGLE_RE.sub(r"sprintf(\1, ", text)
