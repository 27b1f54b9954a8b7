# topmark:header:start
#
#   project      : Py2Rb
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the pipeline tests."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from py2rb.config import MutableConfig
from py2rb.pipeline.assembler import translate_lines
from py2rb.pipeline.context import TranslationContext

if TYPE_CHECKING:
    from py2rb.config import Config


def default_config() -> Config:
    """Return the runtime defaults as a frozen `Config`."""
    return MutableConfig.from_defaults().freeze()


def translate(source: str, config: Config | None = None) -> list[str]:
    """Translate ``source`` and return the output lines.

    Args:
        source (str): Python source text.
        config (Config | None): Configuration; defaults when None.

    Returns:
        list[str]: Output lines without terminators.
    """
    ctx = TranslationContext.bootstrap(config or default_config())
    return list(translate_lines(io.StringIO(source), ctx))


def translate_with_context(
    source: str, config: Config | None = None
) -> tuple[list[str], TranslationContext]:
    """Like `translate`, but also return the final context."""
    ctx = TranslationContext.bootstrap(config or default_config())
    return list(translate_lines(io.StringIO(source), ctx)), ctx
