# topmark:header:start
#
#   project      : Py2Rb
#   file         : pipelines.py
#   file_relpath : src/py2rb/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The token rewrite pipeline (immutable, typed step sequence).

Overview
--------
raw_string → format → call → constructor → reserved_words → self

Each step feeds the next, so order matters: calls are renamed before
capitalized names become constructors, and reserved words are substituted
before ``self`` references are rewritten.

Notes:
* The pipeline is immutable (Final[tuple[RewriteStep, ...]]) and steps are
  instantiated objects (not functions).
"""

from __future__ import annotations

from typing import Final

from .steps import calls, literals, words
from .steps.base import RewriteStep

REWRITE_PIPELINE: Final[tuple[RewriteStep, ...]] = (
    literals.RawStringStep(),  # r'...' -> /.../
    literals.FormatStep(),  # "fmt" % ( -> sprintf("fmt",
    calls.CallStep(),  # len(x) -> x.length, open(f) -> File.open(f)
    calls.ConstructorStep(),  # Foo( -> Foo.new(
    words.ReservedWordStep(),  # None -> nil, ...
    words.SelfStep(),  # self.x -> @x
)
