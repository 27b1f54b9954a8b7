# topmark:header:start
#
#   project      : Py2Rb
#   file         : dump_config.py
#   file_relpath : src/py2rb/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb `dump-config` command.

Emits the effective configuration as TOML after applying defaults, discovered
project config, extra config files, and CLI overrides. The TOML document is
wrapped between ``# === BEGIN ===`` and ``# === END ===`` comment lines, so the
whole output can be saved and used as a ``py2rb.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from py2rb.cli.cmd_common import build_config_common
from py2rb.cli.options import common_config_options
from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from py2rb.cli.console import ConsoleLike
    from py2rb.config import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective Py2Rb configuration (layout and substitution tables) as TOML.",
)
@common_config_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent_width: int | None,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config: If True, skip discovery of project config files.
        config_paths: Additional TOML config files to merge into the effective config.
        indent_width: Indentation unit override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config_common(
        no_config=no_config, config_paths=config_paths, indent_width=indent_width
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    sources: str = ", ".join(config.config_files) or "defaults only"
    console.print(f"# Effective Py2Rb config ({sources})")
    console.print("# === BEGIN ===")
    console.print(config.to_toml().rstrip("\n"))
    console.print("# === END ===")
