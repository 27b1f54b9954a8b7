# topmark:header:start
#
#   project      : Py2Rb
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, layering, sanitizing and discovery.

Merge behavior is tested with synthetic dicts via ``MutableConfig.from_toml_dict``;
file discovery uses a temporary project directory.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from py2rb.config import Config, MutableConfig
from py2rb.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_freeze_to_expected_layout() -> None:
    """The runtime defaults describe four-space indentation and ``end`` terminators."""
    cfg: Config = MutableConfig.from_defaults().freeze()

    assert cfg.indent_width == 4
    assert cfg.terminator == "end"
    assert cfg.comment_prefix == "#"
    assert cfg.continuation_marker == "\\"
    assert cfg.block_opener == ":"
    assert cfg.block_string_delimiters == ("'''", '"""')
    assert cfg.continuation_keywords == ("else", "elif", "except", "finally")
    assert cfg.tables.special_methods["__init__"] == "initialize"
    assert cfg.diagnostics == ()


def test_config_is_immutable() -> None:
    """A frozen `Config` rejects attribute assignment."""
    cfg: Config = MutableConfig.from_defaults().freeze()

    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.indent_width = 2  # type: ignore[misc]


def test_thaw_freeze_roundtrip() -> None:
    """Thawing and freezing again yields an equal snapshot."""
    cfg: Config = MutableConfig.from_defaults().freeze()

    assert cfg.thaw().freeze() == cfg


def test_empty_builder_fills_layout_but_not_tables() -> None:
    """Layout gaps come from the defaults; tables stay as given."""
    cfg: Config = MutableConfig().freeze()

    assert cfg.indent_width == 4
    assert dict(cfg.tables.reserved_words) == {}


def test_higher_layer_overrides_scalars_and_lists() -> None:
    """Values set in a higher layer replace the lower ones; unset ones inherit."""
    base = MutableConfig.from_defaults()
    top = MutableConfig.from_toml_dict(
        {"layout": {"indent_width": 2, "continuation_keywords": ["else"]}}
    )

    cfg: Config = base.merge_with(top).freeze()

    assert cfg.indent_width == 2
    assert cfg.continuation_keywords == ("else",)
    assert cfg.terminator == "end"


def test_tables_merge_key_by_key_preserving_order() -> None:
    """Overridden keys keep their position; new keys are appended."""
    base = MutableConfig.from_defaults()
    top = MutableConfig.from_toml_dict(
        {"reserved_words": {"None": "NIL", "lambda": "->"}, "functions_to_methods": {"abs": "abs"}}
    )

    cfg: Config = base.merge_with(top).freeze()
    words: list[str] = list(cfg.tables.reserved_words)

    assert cfg.tables.reserved_words["None"] == "NIL"
    assert words[0] == "None"
    assert words[-1] == "lambda"
    assert cfg.tables.functions_to_methods["len"] == "length"
    assert cfg.tables.functions_to_methods["abs"] == "abs"


def test_merge_leaves_inputs_untouched() -> None:
    """`merge_with` returns a new builder."""
    base = MutableConfig.from_defaults()
    top = MutableConfig.from_toml_dict({"layout": {"indent_width": 8}})

    base.merge_with(top)

    assert base.indent_width == 4


def test_wrong_types_become_diagnostics() -> None:
    """Values of the wrong type are ignored with a warning each."""
    draft = MutableConfig.from_toml_dict(
        {"layout": {"indent_width": "four", "terminator": 1}, "bogus": True}
    )
    cfg: Config = MutableConfig.from_defaults().merge_with(draft).freeze()

    assert cfg.indent_width == 4
    assert cfg.terminator == "end"
    assert len(cfg.diagnostics) == 3
    assert all(d.level == DiagnosticLevel.WARNING for d in cfg.diagnostics)


def test_non_positive_indent_width_is_ignored() -> None:
    """An indentation unit below one falls back to the lower layer."""
    draft = MutableConfig.from_toml_dict({"layout": {"indent_width": 0}})
    cfg: Config = draft.freeze()

    assert cfg.indent_width == 4
    assert any("indent_width" in d.message for d in cfg.diagnostics)


def test_invalid_reserved_word_pattern_is_dropped() -> None:
    """A reserved-word key that is not a valid pattern is removed with a warning."""
    draft = MutableConfig.from_toml_dict({"reserved_words": {"(unclosed": "x", "None": "nil"}})
    cfg: Config = draft.freeze()

    assert dict(cfg.tables.reserved_words) == {"None": "nil"}
    assert len(cfg.diagnostics) == 1


def test_empty_block_string_delimiter_is_dropped() -> None:
    """Empty delimiters would match every line and are removed."""
    draft = MutableConfig.from_toml_dict({"layout": {"block_string_delimiters": ["", '"""']}})
    cfg: Config = draft.freeze()

    assert cfg.block_string_delimiters == ('"""',)
    assert len(cfg.diagnostics) == 1


def test_pyproject_tool_section(tmp_path: Path) -> None:
    """``[tool.py2rb]`` in ``pyproject.toml`` is read like a standalone file."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.py2rb.layout]\nindent_width = 2\n', encoding="utf-8"
    )

    draft: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert draft is not None
    assert draft.indent_width == 2
    assert draft.config_files == [str(path)]


def test_pyproject_without_tool_section(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.py2rb]`` contributes nothing."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert MutableConfig.from_toml_file(path) is None


def test_load_merged_discovers_project_files(tmp_path: Path) -> None:
    """``py2rb.toml`` is layered over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.py2rb.layout]\nindent_width = 2\nterminator = \"done\"\n", encoding="utf-8"
    )
    (tmp_path / "py2rb.toml").write_text("[layout]\nindent_width = 3\n", encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(start=tmp_path).freeze()

    assert cfg.indent_width == 3
    assert cfg.terminator == "done"
    assert cfg.config_files == (str(tmp_path / "pyproject.toml"), str(tmp_path / "py2rb.toml"))


def test_load_merged_extra_files_win(tmp_path: Path) -> None:
    """Extra config files are merged after the discovered ones."""
    (tmp_path / "py2rb.toml").write_text("[layout]\nindent_width = 3\n", encoding="utf-8")
    extra: Path = tmp_path / "extra.toml"
    extra.write_text("[layout]\nindent_width = 6\n", encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(start=tmp_path, extra_config_files=[extra]).freeze()

    assert cfg.indent_width == 6


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    """With ``no_config`` only the defaults (and extra files) are used."""
    (tmp_path / "py2rb.toml").write_text("[layout]\nindent_width = 3\n", encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(start=tmp_path, no_config=True).freeze()

    assert cfg.indent_width == 4
    assert cfg.config_files == ()


def test_effective_config_renders_as_toml() -> None:
    """The rendered TOML parses back into the same layout and tables."""
    cfg: Config = MutableConfig.from_defaults().freeze()
    parsed: Any = tomlkit.parse(cfg.to_toml()).unwrap()

    assert parsed["layout"]["indent_width"] == 4
    assert parsed["layout"]["continuation_keywords"] == ["else", "elif", "except", "finally"]
    assert list(parsed["reserved_words"]) == list(cfg.tables.reserved_words)
    assert parsed["special_methods"] == dict(cfg.tables.special_methods)
