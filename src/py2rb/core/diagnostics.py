# topmark:header:start
#
#   project      : Py2Rb
#   file         : diagnostics.py
#   file_relpath : src/py2rb/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Py2Rb.

Translation is best-effort, so most problems are not errors: the engine keeps
processing the stream and records what it could not represent. Diagnostics are
collected per translation run (on the `TranslationContext`) and while loading
configuration (on the `MutableConfig`).

Sections:
    * DiagnosticLevel: severity levels.
    * Diagnostic: immutable structured diagnostic payload (level + message + line).
    * DiagnosticLog: mutable collection with helpers for adding and querying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from py2rb.config.logging import Py2RbLogger


logger: Py2RbLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    Translation problems are never fatal, so every diagnostic the engine and
    the config loader record is a warning.
    """

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional input line."""

    level: DiagnosticLevel
    message: str
    line: int | None = None

    def __str__(self) -> str:
        where: str = f"line {self.line}: " if self.line is not None else ""
        return f"[{self.level.value}] {where}{self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    Warnings are added with `add_warning`; diagnostics gathered elsewhere (e.g.
    on a config builder) are appended with `extend`.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str, *, line: int | None = None) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            line: The 1-based input line the diagnostic refers to, if any.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, line))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, preserving their order."""
        for d in diagnostics:
            self._add(d)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
