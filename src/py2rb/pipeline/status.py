# topmark:header:start
#
#   project      : Py2Rb
#   file         : status.py
#   file_relpath : src/py2rb/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""State enum for the logical-line assembler.

The assembler is in exactly one of these states between input lines. Values are
human-readable strings used in TRACE logs.
"""

from __future__ import annotations

from enum import Enum


class AssemblerState(str, Enum):
    """Represents what the assembler expects from the next physical line."""

    NORMAL = "normal"
    IN_BLOCK_COMMENT = "in block comment"
    IN_CONTINUATION = "in continuation"
