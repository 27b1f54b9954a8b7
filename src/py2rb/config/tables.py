# topmark:header:start
#
#   project      : Py2Rb
#   file         : tables.py
#   file_relpath : src/py2rb/config/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable substitution tables consumed by the rewrite engine.

The rewrite engine never hard-codes keyword or function names: it only asks these
tables. A test suite (or a user config file) can swap in different tables without
touching engine logic.

Tables:
    * reserved words: ordered whole-word substitutions over the entire line
      (keys are regular-expression fragments, applied in declaration order).
    * functions to methods: ``len(x)`` -> ``x.length``.
    * functions to functions: ``open(f)`` -> ``File.open(f)``.
    * special methods: ``def __init__`` -> ``def initialize``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class TableKind(str, Enum):
    """Identifies one of the four substitution tables."""

    RESERVED_WORDS = "reserved_words"
    FUNCTIONS_TO_METHODS = "functions_to_methods"
    FUNCTIONS_TO_FUNCTIONS = "functions_to_functions"
    SPECIAL_METHODS = "special_methods"


def _frozen(mapping: Mapping[str, str] | None = None) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class SubstitutionTables:
    """Read-only key/value tables for the rewrite engine.

    Attributes:
        reserved_words (Mapping[str, str]): Ordered reserved-word substitutions.
        functions_to_methods (Mapping[str, str]): Callables rendered as methods on their argument.
        functions_to_functions (Mapping[str, str]): Callables renamed to other callables.
        special_methods (Mapping[str, str]): Special member names (constructor, operators).
    """

    reserved_words: Mapping[str, str] = field(default_factory=_frozen)
    functions_to_methods: Mapping[str, str] = field(default_factory=_frozen)
    functions_to_functions: Mapping[str, str] = field(default_factory=_frozen)
    special_methods: Mapping[str, str] = field(default_factory=_frozen)

    @classmethod
    def from_mappings(
        cls,
        *,
        reserved_words: Mapping[str, str] | None = None,
        functions_to_methods: Mapping[str, str] | None = None,
        functions_to_functions: Mapping[str, str] | None = None,
        special_methods: Mapping[str, str] | None = None,
    ) -> SubstitutionTables:
        """Build tables from plain mappings, copying them into read-only views."""
        return cls(
            reserved_words=_frozen(reserved_words),
            functions_to_methods=_frozen(functions_to_methods),
            functions_to_functions=_frozen(functions_to_functions),
            special_methods=_frozen(special_methods),
        )

    def table(self, kind: TableKind) -> Mapping[str, str]:
        """Return the table identified by ``kind``."""
        return {
            TableKind.RESERVED_WORDS: self.reserved_words,
            TableKind.FUNCTIONS_TO_METHODS: self.functions_to_methods,
            TableKind.FUNCTIONS_TO_FUNCTIONS: self.functions_to_functions,
            TableKind.SPECIAL_METHODS: self.special_methods,
        }[kind]

    def lookup(self, kind: TableKind, key: str) -> str | None:
        """Return the mapped value for ``key`` in table ``kind``, or None when not found."""
        return self.table(kind).get(key)

    @cached_property
    def reserved_word_patterns(self) -> tuple[tuple[re.Pattern[str], str], ...]:
        """Compiled ``(pattern, replacement)`` pairs, in declaration order."""
        return tuple(
            (re.compile(r"\b" + word + r"\b"), replacement)
            for word, replacement in self.reserved_words.items()
        )

    def to_toml_dict(self) -> dict[str, dict[str, str]]:
        """Return the tables as TOML-ready sections."""
        return {kind.value: dict(self.table(kind)) for kind in TableKind}
