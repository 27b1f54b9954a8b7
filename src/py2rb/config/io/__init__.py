# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Py2Rb configuration.

This package centralizes **pure** helpers for reading, validating, and writing TOML
used by Py2Rb's configuration layer. Keeping these utilities separate helps avoid
import cycles and keeps the model classes small and focused.

Typical flow:
    1. Load defaults from code (``load_defaults_dict``).
    2. Load project/user TOML files (``load_toml_dict``).
    3. Read values with checked getters.
    4. Serialize back to TOML when needed (``to_toml``).

Py2Rb uses `tomlkit` for parsing and rendering.
"""

from __future__ import annotations

from .getters import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_mapping_checked,
    get_string_value_or_none_checked,
    get_table_value,
    warn_unknown_keys,
)
from .loaders import load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_int_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_mapping_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
    "warn_unknown_keys",
]
