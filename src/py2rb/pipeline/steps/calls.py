# topmark:header:start
#
#   project      : Py2Rb
#   file         : calls.py
#   file_relpath : src/py2rb/pipeline/steps/calls.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call rewrite steps: table-driven call renaming and constructor calls.

The call pattern only matches calls whose argument list holds no parentheses,
so the innermost call of a nested expression is the one rewritten
(``print(len(items))`` becomes ``print(items.length)``). Substitution is a
single pass: a mapped call that wraps another call keeps its outer name
(``len(str(x))`` becomes ``len(x.to_s)``) and is meant to be fixed by hand.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from py2rb.config.tables import TableKind

from .base import RewriteStep

if TYPE_CHECKING:
    from py2rb.pipeline.context import RewriteState

# name(args) with no nested parens, not preceded by "." (already a method call)
CALL_RE: Final[re.Pattern[str]] = re.compile(r"(?<!\.)\b(\w+)\s*\(([^()]+)\)")

# Receivers that need no parentheses: identifiers and attribute chains.
SIMPLE_RECEIVER_RE: Final[re.Pattern[str]] = re.compile(r"[\w.]+")

CONSTRUCTOR_RE: Final[re.Pattern[str]] = re.compile(r"\b([A-Z]\w*)\(")
CLASS_HEADER_RE: Final[re.Pattern[str]] = re.compile(r"class\b")


@dataclass
class CallStep(RewriteStep):
    """Rename bare calls found in the substitution tables.

    * ``functions_to_methods``: ``len(x)`` -> ``x.length``, ``len(a + b)`` -> ``(a + b).length``
    * ``functions_to_functions``: ``open(f)`` -> ``File.open(f)``

    Calls to other names are left untouched.
    """

    name: str = "call"

    def rewrite(self, state: RewriteState) -> str:
        """Rename calls found in the call tables, leave the others untouched."""
        tables = state.tables

        def replace(match: re.Match[str]) -> str:
            func, args = match.group(1), match.group(2)
            method: str | None = tables.lookup(TableKind.FUNCTIONS_TO_METHODS, func)
            if method is not None:
                receiver: str = args if SIMPLE_RECEIVER_RE.fullmatch(args) else f"({args})"
                return f"{receiver}.{method}"
            other: str | None = tables.lookup(TableKind.FUNCTIONS_TO_FUNCTIONS, func)
            if other is not None:
                return f"{other}({args})"
            return match.group(0)

        return CALL_RE.sub(replace, state.text)


@dataclass
class ConstructorStep(RewriteStep):
    """Turn calls of capitalized names into constructor calls (``Foo(x)`` -> ``Foo.new(x)``).

    Class header lines are skipped so that base class lists stay intact.
    """

    name: str = "constructor"

    def may_proceed(self, state: RewriteState) -> bool:
        """Skip class header lines."""
        return CLASS_HEADER_RE.match(state.text) is None

    def rewrite(self, state: RewriteState) -> str:
        """Append `.new` to capitalized callees."""
        return CONSTRUCTOR_RE.sub(r"\1.new(", state.text)
