# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Py2Rb API (stable surface).

This module exposes a **small, typed API** for integrations that want to
translate text programmatically without going through the CLI.

Versioning policy
-----------------
- The **signatures** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Configuration contract
----------------------
- Functions accept ``config=None`` (runtime defaults, no file discovery), a plain
  **mapping** mirroring the TOML shape, or a frozen [`py2rb.config.Config`][].
- A mapping is layered on top of the defaults: tables merge key by key, so a
  mapping only needs the entries it adds or changes:

```python
from py2rb import api

ruby = api.translate_text(
    "x = len(items)\\n",
    config={"functions_to_methods": {"sum": "sum"}, "layout": {"indent_width": 2}},
)
```
"""

from __future__ import annotations

import io
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from py2rb.config import Config, MutableConfig
from py2rb.config.logging import get_logger
from py2rb.pipeline import assembler, engine
from py2rb.pipeline.context import TranslationContext

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import TextIO

    from py2rb.config.logging import Py2RbLogger

logger: Py2RbLogger = get_logger(__name__)

__all__ = [
    "TranslationContext",
    "resolve_config",
    "translate_lines",
    "translate_stream",
    "translate_text",
]


def resolve_config(config: Config | Mapping[str, Any] | None = None) -> Config:
    """Return a frozen `Config` for ``config``.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen config (returned as is),
            a TOML-shaped mapping layered over the defaults, or None for the defaults.

    Returns:
        Config: The effective configuration.
    """
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if isinstance(config, Mapping):
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config)))
    return draft.freeze()


def translate_lines(
    lines: Iterable[str],
    config: Config | Mapping[str, Any] | None = None,
) -> Iterator[str]:
    """Translate Python source lines lazily.

    Args:
        lines (Iterable[str]): Input lines, with or without line terminators.
        config (Config | Mapping[str, Any] | None): See `resolve_config`.

    Yields:
        str: Ruby output lines, without line terminators.
    """
    ctx: TranslationContext = TranslationContext.bootstrap(resolve_config(config))
    yield from assembler.translate_lines(lines, ctx)


def translate_text(text: str, config: Config | Mapping[str, Any] | None = None) -> str:
    """Translate Python source text into approximate Ruby source text.

    Args:
        text (str): Python source.
        config (Config | Mapping[str, Any] | None): See `resolve_config`.

    Returns:
        str: Ruby source, one newline-terminated line per output line.
    """
    return "".join(line + "\n" for line in translate_lines(io.StringIO(text), config))


def translate_stream(
    src: Iterable[str],
    out: TextIO,
    config: Config | Mapping[str, Any] | None = None,
) -> TranslationContext:
    """Translate a text stream into another, line by line.

    Args:
        src (Iterable[str]): Input stream (e.g. an open text file).
        out (TextIO): Output stream.
        config (Config | Mapping[str, Any] | None): See `resolve_config`.

    Returns:
        TranslationContext: The final context, holding the diagnostics of the run.
    """
    return engine.translate_stream(src, out, resolve_config(config))
