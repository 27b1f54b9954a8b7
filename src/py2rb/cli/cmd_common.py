# topmark:header:start
#
#   project      : Py2Rb
#   file         : cmd_common.py
#   file_relpath : src/py2rb/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI command implementations."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from py2rb.cli.errors import Py2RbConfigError
from py2rb.config import MutableConfig
from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from py2rb.config import Config
    from py2rb.config.logging import Py2RbLogger

logger: Py2RbLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the logging level resolved from ``-v``/``-q`` (WARNING when unset)."""
    return int(ctx.obj.get("verbosity_level", 30))


def build_config_common(
    *,
    no_config: bool,
    config_paths: tuple[str, ...] | list[str],
    indent_width: int | None,
) -> Config:
    """Materialize the effective Config for a command.

    Layers defaults, discovered project config (unless ``no_config``), the extra
    ``--config`` files and the CLI overrides, then freezes the result.

    Raises:
        Py2RbConfigError: If a config file cannot be read or is not valid TOML.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except TomlkitParseError as e:
        raise Py2RbConfigError(f"Invalid TOML in config file: {e}") from e
    except OSError as e:
        raise Py2RbConfigError(f"Cannot read config file: {e}") from e

    if indent_width is not None:
        draft.indent_width = indent_width

    config: Config = draft.freeze()
    logger.debug("Effective config sources: %s", list(config.config_files))
    return config
