# topmark:header:start
#
#   project      : Py2Rb
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public `py2rb.api` surface."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from py2rb import api
from py2rb.config import Config, MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterator


def test_translate_text_with_defaults() -> None:
    """Text in, newline-terminated Ruby text out."""
    source = "try:\n    f = open(name)\nexcept IOError as e:\n    raise\n"

    assert api.translate_text(source) == (
        "begin\n"
        "    f = File.open(name)\n"
        "rescue IOError => e\n"
        "    raise\n"
        "end\n"
    )


def test_translate_text_empty_input() -> None:
    """No input lines produce no output."""
    assert api.translate_text("") == ""


def test_mapping_config_is_layered_over_defaults() -> None:
    """A mapping only needs the entries it changes."""
    ruby: str = api.translate_text(
        "if ok:\n  x = sum(v)\n",
        config={"functions_to_methods": {"sum": "sum"}, "layout": {"indent_width": 2}},
    )

    assert ruby == "if ok\n  x = v.sum\nend\n"


def test_frozen_config_is_used_as_is() -> None:
    """A `Config` instance is passed through unchanged."""
    cfg: Config = MutableConfig.from_defaults().freeze()

    assert api.resolve_config(cfg) is cfg


def test_translate_lines_is_lazy() -> None:
    """Output for a statement is available before the rest of the input is read."""
    consumed: list[str] = []

    def source() -> Iterator[str]:
        for line in ("a = None", "b = True", "c = False"):
            consumed.append(line)
            yield line

    out: Iterator[str] = api.translate_lines(source())

    assert next(out) == "a = nil"
    assert consumed == ["a = None"]
    assert list(out) == ["b = true", "c = false"]


def test_translate_stream_returns_diagnostics() -> None:
    """Problems found while translating are returned, not raised."""
    out = io.StringIO()
    ctx = api.translate_stream(io.StringIO('"""never closed\n'), out)

    assert out.getvalue() == "# never closed\n"
    assert ctx.diagnostics.has_warning()


def test_independent_translations_share_no_state() -> None:
    """Class names and decorator flags do not leak from one run to the next."""
    api.translate_text("class A(B):\n    @staticmethod\n")

    assert api.translate_text("def f(self):\n    pass\n") == "def f\n    pass\nend\n"
