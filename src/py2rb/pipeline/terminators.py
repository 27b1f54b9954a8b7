# topmark:header:start
#
#   project      : Py2Rb
#   file         : terminators.py
#   file_relpath : src/py2rb/pipeline/terminators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block-terminator tracker.

Block structure in the input is implied by indentation only. When a statement is
less indented than the previous one, one terminator line is emitted for every
indentation unit crossed, each at the depth of the block it closes. A statement
that continues the enclosing block (``else``, ``except``...) closes one block
fewer: the block it continues stays open.

Blank lines seen before the statement are released here, after the terminators,
so they never separate a block from its terminator.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.context import TranslationContext

logger: Py2RbLogger = get_logger(__name__)


def is_block_continuation(text: str, keywords: Iterable[str]) -> bool:
    """Return True when ``text`` starts with one of the block-continuation keywords.

    The keyword must be the whole statement or be followed by a non-word
    character: ``else`` and ``else:`` match, ``elsewhere = 1`` does not.

    Args:
        text (str): The statement text, without indentation.
        keywords (Iterable[str]): The block-continuation keywords.

    Returns:
        bool: True if the statement continues the enclosing block.
    """
    return any(re.match(re.escape(kw) + r"(?!\w)", text) is not None for kw in keywords)


def emit_terminators(ctx: TranslationContext, *, continues_block: bool = False) -> list[str]:
    """Close the blocks left by a dedent and release pending blank lines.

    Updates ``ctx.previous_indent`` to ``ctx.current_indent`` and resets
    ``ctx.pending_blank_lines``.

    Args:
        ctx (TranslationContext): The translation context; ``current_indent`` is
            the indent of the statement about to be emitted.
        continues_block (bool): True when the statement is a block-continuation
            keyword.

    Returns:
        list[str]: The terminator lines followed by the released blank lines.
    """
    out: list[str] = []
    unit: int = ctx.config.indent_width
    terminator: str = ctx.config.terminator

    depth: int = ctx.previous_indent
    while ctx.current_indent < depth:
        depth = max(depth - unit, 0)
        if depth == ctx.current_indent and continues_block:
            break
        out.append(" " * depth + terminator)

    if out:
        logger.debug(
            "Line %d: %d terminator(s) for dedent %d -> %d",
            ctx.line_number,
            len(out),
            ctx.previous_indent,
            ctx.current_indent,
        )

    ctx.previous_indent = ctx.current_indent

    out.extend(ctx.indent_string for _ in range(ctx.pending_blank_lines))
    ctx.pending_blank_lines = 0
    return out
