# topmark:header:start
#
#   project      : Py2Rb
#   file         : guards.py
#   file_relpath : src/py2rb/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for TOML parsing.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML parsing (plain dicts after `tomlkit` unwrapping).
"""

from __future__ import annotations

from typing import Any, TypeGuard

from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.
    """
    return isinstance(obj, list)
