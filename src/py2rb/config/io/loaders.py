# topmark:header:start
#
#   project      : Py2Rb
#   file         : loaders.py
#   file_relpath : src/py2rb/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Py2Rb configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (`py2rb.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures. `tomlkit`
preserves key order, which matters for `[reserved_words]`: its entries are applied
in declaration order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from py2rb.config.keys import Toml
from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from py2rb.config.logging import Py2RbLogger

    from .types import TomlTable

logger: Py2RbLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Py2Rb's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. The substitution tables are
    plain data; users extend or override them with their own TOML files.

    Keys of ``[reserved_words]`` are regular-expression fragments matched between
    word boundaries, applied in the order listed here (``is not`` before ``is``).

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_LAYOUT: {
            Toml.KEY_INDENT_WIDTH: 4,
            Toml.KEY_TERMINATOR: "end",
            Toml.KEY_COMMENT_PREFIX: "#",
            Toml.KEY_CONTINUATION_MARKER: "\\",
            Toml.KEY_BLOCK_OPENER: ":",
            Toml.KEY_BLOCK_STRING_DELIMITERS: ["'''", '"""'],
            Toml.KEY_CONTINUATION_KEYWORDS: ["else", "elif", "except", "finally"],
        },
        Toml.SECTION_RESERVED_WORDS: {
            "None": "nil",
            "True": "true",
            "False": "false",
            "elif": "elsif",
            r"\s*is\s+not": ".not_equal?",  # not real Ruby; fix by hand as `!=`
            r"\s*is": ".equal?",
            "end": "end_",  # not reserved in Python but is in Ruby
        },
        Toml.SECTION_FUNCTIONS_TO_METHODS: {
            "len": "length",
            "str": "to_s",
            "int": "to_i",
            "float": "to_f",
            "repr": "inspect",
            "sorted": "sort",
        },
        Toml.SECTION_FUNCTIONS_TO_FUNCTIONS: {
            "open": "File.open",
        },
        Toml.SECTION_SPECIAL_METHODS: {
            "__init__": "initialize",
            "__eq__": "==",
            "__ne__": "!=",
            "__lt__": "<",
            "__le__": "<=",
            "__gt__": ">",
            "__ge__": ">=",
            "__add__": "+",
            "__sub__": "-",
            "__mul__": "*",
            "__str__": "to_s",
            "__repr__": "inspect",
            "__len__": "length",
            "__hash__": "hash",
            "__call__": "call",
            "__iter__": "each",
            "__contains__": "include?",
            "__getitem__": "[]",
            "__setitem__": "[]=",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``py2rb.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Raises:
        OSError: When the file cannot be read.
        TomlkitParseError: When the file is not valid TOML.

    Notes:
        Encoding is assumed to be UTF-8. Unlike the getters, parse failures are
        raised: a config file that cannot be read is a configuration error.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
