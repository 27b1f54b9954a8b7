# topmark:header:start
#
#   project      : Py2Rb
#   file         : context.py
#   file_relpath : src/py2rb/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Translation context model for the Py2Rb pipeline.

This module defines the state that flows from one input line to the next while a
single stream is translated. The central type is
[`TranslationContext`][py2rb.pipeline.context.TranslationContext]: it is created
when a stream starts (see `TranslationContext.bootstrap`) and discarded when the
stream ends, so independent translations never share state.

Sections:
    LogicalLine:
        Immutable view of one physical input line after indentation analysis.

    TranslationContext:
        Mutable per-stream state: indentation bookkeeping, pending blank lines,
        the continuation flag, the last class seen, the pending decorator flags
        and the diagnostics collected so far.

    RewriteState:
        Statement text passed from one token rewrite step to the next.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger
from py2rb.constants import UNKNOWN_CLASS_NAME
from py2rb.core.diagnostics import DiagnosticLog
from py2rb.pipeline.status import AssemblerState

if TYPE_CHECKING:
    from py2rb.config import Config, SubstitutionTables
    from py2rb.config.logging import Py2RbLogger

logger: Py2RbLogger = get_logger(__name__)

__all__: list[str] = [
    "LogicalLine",
    "RewriteState",
    "TranslationContext",
]


@dataclass(frozen=True)
class LogicalLine:
    """One physical input line, split and measured.

    Attributes:
        raw (str): The line as read, without its line terminator.
        number (int): 1-based position of the line in the input stream.
        indent_width (int): Column width of the leading whitespace.
        text (str): The line without leading whitespace, right-trimmed.
        continued (bool): True when ``text`` ends with the continuation marker.
    """

    raw: str
    number: int
    indent_width: int
    text: str
    continued: bool = False

    @property
    def is_blank(self) -> bool:
        """Return True for lines with nothing but whitespace."""
        return not self.text

    @property
    def indent_string(self) -> str:
        """Return the line's own indentation, normalized to spaces."""
        return " " * self.indent_width


@dataclass
class TranslationContext:
    """Mutable state carried between lines of a single translation.

    Attributes:
        config (Config): Effective configuration for this translation.
        current_indent (int): Indent width of the line being processed.
        previous_indent (int): Indent width of the last statement line that was
            neither blank nor a continuation interior.
        pending_blank_lines (int): Blank lines seen since the last statement; they
            are emitted after the next terminators, never before.
        in_continuation (bool): True when the previous physical line ended with
            the continuation marker.
        current_class_name (str): Name of the last class header seen, used as the
            receiver for static method definitions.
        next_method_is_static (bool): Set by a static/class method decorator and
            consumed by the next definition.
        next_method_is_property (bool): Set by a property decorator and consumed
            by the next definition.
        state (AssemblerState): What the assembler expects from the next line.
        source (str): Name of the input, used in logs and diagnostics.
        line_number (int): 1-based number of the last line read.
        lines_emitted (int): Number of output lines produced so far.
        diagnostics (DiagnosticLog): Problems recorded while translating.
    """

    config: Config
    source: str = "<stream>"
    current_indent: int = 0
    previous_indent: int = 0
    pending_blank_lines: int = 0
    in_continuation: bool = False
    current_class_name: str = UNKNOWN_CLASS_NAME
    next_method_is_static: bool = False
    next_method_is_property: bool = False
    state: AssemblerState = AssemblerState.NORMAL
    line_number: int = 0
    lines_emitted: int = 0
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def bootstrap(cls, config: Config, *, source: str = "<stream>") -> TranslationContext:
        """Create a fresh context for one translation run.

        Args:
            config (Config): The effective configuration.
            source (str): Name of the input (a path, or ``<stdin>``).

        Returns:
            TranslationContext: A context in the initial state.
        """
        logger.debug("Bootstrapping translation context for %s", source)
        return cls(config=config, source=source)

    @property
    def indent_string(self) -> str:
        """Return the indentation string for the current line."""
        return " " * self.current_indent


@dataclass
class RewriteState:
    """Text of one statement as it flows through the token rewrite steps.

    Attributes:
        text (str): The statement text; each step reads and replaces it.
        tables (SubstitutionTables): The substitution tables for this run.
        applied (list[str]): Names of the steps that changed ``text``, in order.
    """

    text: str
    tables: SubstitutionTables
    applied: list[str] = field(default_factory=lambda: [])
