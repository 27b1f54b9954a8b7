# topmark:header:start
#
#   project      : Py2Rb
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in py2rb.config.io.

Covers the checked getters (which warn and fall back instead of raising), the
strict file loader and the tomlkit-based renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from py2rb.config.io import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_mapping_checked,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    warn_unknown_keys,
)
from py2rb.config.logging import Py2RbLogger, get_logger
from py2rb.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

logger: Py2RbLogger = get_logger(__name__)


def test_int_getter_rejects_bool() -> None:
    """``true`` is not accepted where an int is expected."""
    diags = DiagnosticLog()
    value: int | None = get_int_value_or_none_checked(
        {"indent_width": True}, "indent_width", where="[layout]", diagnostics=diags, logger=logger
    )

    assert value is None
    assert diags.has_warning()
    assert "[layout].indent_width" in next(iter(diags)).message


def test_int_getter_missing_key_is_silent() -> None:
    """A missing key returns None without diagnostics."""
    diags = DiagnosticLog()
    value: int | None = get_int_value_or_none_checked(
        {}, "indent_width", where="[layout]", diagnostics=diags, logger=logger
    )

    assert value is None
    assert len(diags) == 0


def test_string_list_getter_drops_non_strings() -> None:
    """Non-string list entries are dropped, one warning each."""
    diags = DiagnosticLog()
    value: list[str] | None = get_string_list_value_or_none_checked(
        {"kw": ["else", 3, "elif", None]}, "kw", where="[layout]", diagnostics=diags, logger=logger
    )

    assert value == ["else", "elif"]
    assert len(diags) == 2


def test_string_list_getter_rejects_scalar() -> None:
    """A scalar where a list is expected is reported and ignored."""
    diags = DiagnosticLog()
    value: list[str] | None = get_string_list_value_or_none_checked(
        {"kw": "else"}, "kw", where="[layout]", diagnostics=diags, logger=logger
    )

    assert value is None
    assert diags.has_warning()


def test_string_mapping_keeps_declaration_order() -> None:
    """Table entries come back in the order they were declared."""
    diags = DiagnosticLog()
    data: dict[str, Any] = {"reserved_words": {"b": "2", "a": "1", "c": 3}}
    value: dict[str, str] = get_string_mapping_checked(
        data, "reserved_words", diagnostics=diags, logger=logger
    )

    assert list(value.items()) == [("b", "2"), ("a", "1")]
    assert len(diags) == 1


def test_string_mapping_rejects_non_table() -> None:
    """A section that is not a table is treated as empty."""
    diags = DiagnosticLog()
    value: dict[str, str] = get_string_mapping_checked(
        {"special_methods": ["x"]}, "special_methods", diagnostics=diags, logger=logger
    )

    assert value == {}
    assert diags.has_warning()


def test_warn_unknown_keys() -> None:
    """Each unexpected key produces one warning."""
    diags = DiagnosticLog()
    warn_unknown_keys(
        {"layout": {}, "bogus": 1},
        frozenset({"layout"}),
        where="top level",
        diagnostics=diags,
        logger=logger,
    )

    assert [d.message for d in diags] == ["Unknown key in top level: bogus"]


def test_defaults_reserved_words_order() -> None:
    """Negated identity is listed before plain identity so it is rewritten first."""
    words: list[str] = list(load_defaults_dict()["reserved_words"])

    assert words.index(r"\s*is\s+not") < words.index(r"\s*is")


def test_load_toml_dict_reads_file(tmp_path: Path) -> None:
    """A valid TOML file is parsed into plain Python values."""
    path: Path = tmp_path / "py2rb.toml"
    path.write_text('[layout]\nindent_width = 2\nterminator = "end"\n', encoding="utf-8")

    data: dict[str, Any] = load_toml_dict(path)

    assert data == {"layout": {"indent_width": 2, "terminator": "end"}}


def test_load_toml_dict_raises_on_invalid_toml(tmp_path: Path) -> None:
    """Malformed TOML is a hard error, not a warning."""
    path: Path = tmp_path / "py2rb.toml"
    path.write_text("[layout\nindent_width = \n", encoding="utf-8")

    with pytest.raises(TomlkitParseError):
        load_toml_dict(path)


def test_load_toml_dict_raises_on_missing_file(tmp_path: Path) -> None:
    """A missing file propagates the OSError."""
    with pytest.raises(OSError):
        load_toml_dict(tmp_path / "nope.toml")


def test_to_toml_drops_none_values() -> None:
    """``None`` has no TOML representation and is left out."""
    rendered: str = to_toml({"layout": {"indent_width": 4, "terminator": None}})
    parsed: Any = tomlkit.parse(rendered)

    assert parsed["layout"]["indent_width"] == 4
    assert "terminator" not in parsed["layout"]
