# topmark:header:start
#
#   project      : Py2Rb
#   file         : getters.py
#   file_relpath : src/py2rb/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

All getters here are *checked*: they validate the expected shape and record
**warnings** in a `DiagnosticLog` (and also log a warning) when a user value
has the wrong type. Invalid values are dropped, so the layer below (usually the
built-in defaults) stays in effect.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from .guards import is_any_list, is_toml_table

if TYPE_CHECKING:
    from py2rb.config.logging import Py2RbLogger
    from py2rb.core.diagnostics import DiagnosticLog

    from .types import TomlTable


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or not a table."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: Py2RbLogger,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, bool):
        logger.warning("Expected int in %s, got bool: %r", loc, value)
        diagnostics.add_warning(f"Expected int in {loc}, got bool: {value!r}")
        return None

    if isinstance(value, int):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: Py2RbLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: Py2RbLogger,
) -> list[str] | None:
    """Extract an optional list of strings, dropping non-string entries with a warning.

    Behavior:
        - If the key is missing, returns None (inherit the lower layer).
        - If the value is not a list, a warning is recorded and None is returned.
        - Non-string items are ignored; each emits a warning and a diagnostic.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[layout]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (Py2RbLogger): Logger for emitting warnings.

    Returns:
        list[str] | None: Filtered list containing only string entries, or None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not is_any_list(value):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_string_mapping_checked(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog,
    logger: Py2RbLogger,
) -> dict[str, str]:
    """Extract a string-to-string table, preserving declaration order.

    Entries whose value is not a string are dropped with a warning. A section that
    is present but is not a table is reported and treated as empty.

    Args:
        table (TomlTable): TOML document (top-level table) to query.
        key (str): Section name (e.g. ``"reserved_words"``).
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (Py2RbLogger): Logger for emitting warnings.

    Returns:
        dict[str, str]: The validated mapping (insertion order = TOML order).
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}

    loc: Final[str] = f"[{key}]"
    if not is_toml_table(value):
        logger.warning("Expected table in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected table in {loc}, got {type(value).__name__}: {value!r}")
        return {}

    out: dict[str, str] = {}
    for k, v in value.items():
        if isinstance(v, str):
            out[str(k)] = v
        else:
            logger.warning("Ignoring non-string value in %s.%s: %r", loc, k, v)
            diagnostics.add_warning(f"Ignoring non-string value in {loc}.{k}: {v!r}")
    return out


def warn_unknown_keys(
    table: TomlTable,
    allowed: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: Py2RbLogger,
) -> None:
    """Record a warning for every key of ``table`` that is not in ``allowed``."""
    for k in table:
        if k not in allowed:
            logger.warning("Unknown key in %s: %s", where, k)
            diagnostics.add_warning(f"Unknown key in {where}: {k}")
