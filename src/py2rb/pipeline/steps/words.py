# topmark:header:start
#
#   project      : Py2Rb
#   file         : words.py
#   file_relpath : src/py2rb/pipeline/steps/words.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Word rewrite steps: reserved words and ``self`` references."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .base import RewriteStep

if TYPE_CHECKING:
    from py2rb.pipeline.context import RewriteState

SELF_CALL_RE: Final[re.Pattern[str]] = re.compile(r"\bself\.(\w+\s*)\(")
SELF_ATTR_RE: Final[re.Pattern[str]] = re.compile(r"\bself\._?")


@dataclass
class ReservedWordStep(RewriteStep):
    """Apply the ``reserved_words`` table as whole-word substitutions.

    Entries are applied in declaration order, each over the whole line, so an
    earlier entry can shadow a later one (``is not`` must come before ``is``).
    Replacement values are inserted literally.
    """

    name: str = "reserved_words"

    def rewrite(self, state: RewriteState) -> str:
        """Apply each reserved-word entry in turn."""
        text: str = state.text
        for pattern, replacement in state.tables.reserved_word_patterns:
            text = pattern.sub(lambda _m, r=replacement: r, text)
        return text


@dataclass
class SelfStep(RewriteStep):
    """Drop ``self.`` on method calls and turn attribute access into instance variables.

    ``self.run(x)`` -> ``run(x)``, ``self.name`` and ``self._name`` -> ``@name``.
    """

    name: str = "self"

    def rewrite(self, state: RewriteState) -> str:
        """Rewrite `self` method calls first, then attribute accesses."""
        text: str = SELF_CALL_RE.sub(r"\1(", state.text)
        return SELF_ATTR_RE.sub("@", text)
