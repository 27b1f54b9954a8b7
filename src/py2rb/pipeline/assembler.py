# topmark:header:start
#
#   project      : Py2Rb
#   file         : assembler.py
#   file_relpath : src/py2rb/pipeline/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logical-line assembler: the per-line state machine driving a translation.

Each physical input line is measured, classified and routed:

* blank lines are counted and released later by the terminator tracker;
* a line opening a block string (a triple-quote delimiter) starts a run of
  comment lines that ends at the closing delimiter;
* lines following a trailing continuation marker are copied through unchanged;
* any other line is a fresh statement: terminators, token rewrites, statement
  dispatch, emission.

The assembler is streaming: `LineAssembler.feed` returns the output lines made
available by one input line, and `LineAssembler.finish` closes what is still
open at end of input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger
from py2rb.pipeline import runner
from py2rb.pipeline.context import LogicalLine
from py2rb.pipeline.indent import measure_indent_width, split_indent
from py2rb.pipeline.statements import dispatch_statement
from py2rb.pipeline.status import AssemblerState
from py2rb.pipeline.terminators import emit_terminators, is_block_continuation

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from py2rb.config import Config
    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.context import RewriteState, TranslationContext
    from py2rb.pipeline.statements import StatementResult

logger: Py2RbLogger = get_logger(__name__)


class LineAssembler:
    """Drive one translation, line by line.

    Args:
        ctx (TranslationContext): The context of this translation; the assembler
            owns it for the duration of the stream.
    """

    def __init__(self, ctx: TranslationContext) -> None:
        self.ctx: TranslationContext = ctx
        self.config: Config = ctx.config
        # Open block string: its closing delimiter, its indentation and its first line.
        self._delimiter: str = ""
        self._comment_indent: str = ""
        self._comment_start: int = 0

    # ------------------------------ Public API ------------------------------

    def feed(self, raw: str) -> list[str]:
        """Process one physical input line.

        Args:
            raw (str): The input line, with or without its line terminator.

        Returns:
            list[str]: Output lines (without terminators) produced by this line.
        """
        ctx: TranslationContext = self.ctx
        ctx.line_number += 1
        raw = raw.rstrip("\r\n")

        if ctx.state is AssemblerState.IN_BLOCK_COMMENT:
            return self._emit(self._block_comment_line(raw.strip()))

        leading_ws, text = split_indent(raw)
        line = LogicalLine(
            raw=raw,
            number=ctx.line_number,
            indent_width=measure_indent_width(leading_ws),
            text=text,
            continued=text.endswith(self.config.continuation_marker),
        )

        ctx.previous_indent = ctx.current_indent
        ctx.current_indent = line.indent_width

        if line.is_blank:
            logger.trace("Line %d: blank", line.number)
            self._blank()
            return []

        if ctx.state is AssemblerState.IN_CONTINUATION:
            logger.trace("Line %d: continuation", line.number)
            self._set_continuation(line.continued)
            ctx.current_indent = ctx.previous_indent
            return self._emit([line.indent_string + line.text])

        delimiter: str | None = self._block_string_opener(line.text)
        if delimiter is not None:
            logger.trace("Line %d: block string opened with %s", line.number, delimiter)
            ctx.current_indent = ctx.previous_indent
            ctx.state = AssemblerState.IN_BLOCK_COMMENT
            self._delimiter = delimiter
            self._comment_indent = line.indent_string
            self._comment_start = line.number
            return self._emit(self._block_comment_line(line.text[len(delimiter) :].strip()))

        logger.trace("Line %d: statement at indent %d", line.number, line.indent_width)
        return self._emit(self._statement(line))

    def finish(self) -> list[str]:
        """Close everything still open at end of input.

        Returns:
            list[str]: The remaining terminator lines and pending blank lines.
        """
        ctx: TranslationContext = self.ctx
        if ctx.state is AssemblerState.IN_BLOCK_COMMENT:
            logger.warning(
                "Block string opened at line %d is not terminated", self._comment_start
            )
            ctx.diagnostics.add_warning(
                f"Unterminated block string (missing {self._delimiter})",
                line=self._comment_start,
            )
        elif ctx.state is AssemblerState.IN_CONTINUATION:
            ctx.diagnostics.add_warning(
                "Input ends with a continuation marker", line=ctx.line_number
            )
        ctx.state = AssemblerState.NORMAL
        ctx.in_continuation = False

        ctx.current_indent = 0
        return self._emit(emit_terminators(ctx))

    # ------------------------------ Line kinds ------------------------------

    def _blank(self) -> None:
        self.ctx.pending_blank_lines += 1
        self.ctx.current_indent = self.ctx.previous_indent

    def _block_string_opener(self, text: str) -> str | None:
        for delimiter in self.config.block_string_delimiters:
            if text.startswith(delimiter):
                return delimiter
        return None

    def _block_comment_line(self, text: str) -> list[str]:
        """Render one line of an open block string as a comment.

        The line holding the closing delimiter ends the block string; anything
        after the delimiter is dropped.
        """
        end: int = text.find(self._delimiter)
        if end >= 0:
            text = text[:end].rstrip()
            self.ctx.state = AssemblerState.NORMAL
            logger.trace("Line %d: block string closed", self.ctx.line_number)
        return [f"{self._comment_indent}{self.config.comment_prefix} {text}".rstrip()]

    def _statement(self, line: LogicalLine) -> list[str]:
        ctx: TranslationContext = self.ctx
        marker: str = self.config.continuation_marker
        opener: str = self.config.block_opener

        text: str = line.text
        if line.continued:
            text = text[: -len(marker)].rstrip()
        if opener and text.endswith(opener):
            text = text[: -len(opener)].rstrip()

        state: RewriteState = runner.run(text, self.config.tables)
        if not state.text and not line.continued:
            logger.trace("Line %d: empty after rewrites, counted as blank", line.number)
            self._blank()
            return []

        self._set_continuation(line.continued)

        out: list[str] = emit_terminators(
            ctx,
            continues_block=is_block_continuation(text, self.config.continuation_keywords),
        )

        result: StatementResult = dispatch_statement(state.text, ctx)
        if result.suppressed:
            return out
        statement: str = result.text or ""
        if line.continued:
            statement += marker
        out.append(ctx.indent_string + statement)
        return out

    # ------------------------------- Helpers -------------------------------

    def _set_continuation(self, continued: bool) -> None:
        self.ctx.in_continuation = continued
        self.ctx.state = AssemblerState.IN_CONTINUATION if continued else AssemblerState.NORMAL

    def _emit(self, lines: list[str]) -> list[str]:
        self.ctx.lines_emitted += len(lines)
        return lines


def translate_lines(lines: Iterable[str], ctx: TranslationContext) -> Iterator[str]:
    """Translate a stream of physical lines, yielding output lines as they become available.

    Args:
        lines (Iterable[str]): Input lines, with or without line terminators.
        ctx (TranslationContext): A fresh context for this translation.

    Yields:
        str: Output lines, without line terminators.
    """
    assembler = LineAssembler(ctx)
    for raw in lines:
        yield from assembler.feed(raw)
    yield from assembler.finish()
    logger.debug(
        "Translated %d line(s) into %d line(s), %d diagnostic(s)",
        ctx.line_number,
        ctx.lines_emitted,
        len(ctx.diagnostics),
    )
