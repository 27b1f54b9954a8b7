# topmark:header:start
#
#   project      : Py2Rb
#   file         : keys.py
#   file_relpath : src/py2rb/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Py2Rb configuration.

This module defines the authoritative string constants used when reading,
writing, and validating Py2Rb configuration from TOML sources
(``py2rb.toml`` and ``[tool.py2rb]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Py2Rb configuration.

    The ordering of constants mirrors `load_defaults_dict()` to make it easy to
    audit schema changes and keep defaults/docs/parsing aligned.
    """

    # [layout]
    SECTION_LAYOUT: Final[str] = "layout"

    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_TERMINATOR: Final[str] = "terminator"
    KEY_COMMENT_PREFIX: Final[str] = "comment_prefix"
    KEY_CONTINUATION_MARKER: Final[str] = "continuation_marker"
    KEY_BLOCK_OPENER: Final[str] = "block_opener"
    KEY_BLOCK_STRING_DELIMITERS: Final[str] = "block_string_delimiters"
    KEY_CONTINUATION_KEYWORDS: Final[str] = "continuation_keywords"

    # Substitution tables (string -> string)
    SECTION_RESERVED_WORDS: Final[str] = "reserved_words"
    SECTION_FUNCTIONS_TO_METHODS: Final[str] = "functions_to_methods"
    SECTION_FUNCTIONS_TO_FUNCTIONS: Final[str] = "functions_to_functions"
    SECTION_SPECIAL_METHODS: Final[str] = "special_methods"

    # ---------------------------- Schema helpers ----------------------------

    TABLE_SECTIONS: Final[tuple[str, ...]] = (
        SECTION_RESERVED_WORDS,
        SECTION_FUNCTIONS_TO_METHODS,
        SECTION_FUNCTIONS_TO_FUNCTIONS,
        SECTION_SPECIAL_METHODS,
    )

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_LAYOUT,
            *TABLE_SECTIONS,
        }
    )

    ALLOWED_LAYOUT_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_INDENT_WIDTH,
            KEY_TERMINATOR,
            KEY_COMMENT_PREFIX,
            KEY_CONTINUATION_MARKER,
            KEY_BLOCK_OPENER,
            KEY_BLOCK_STRING_DELIMITERS,
            KEY_CONTINUATION_KEYWORDS,
        }
    )
