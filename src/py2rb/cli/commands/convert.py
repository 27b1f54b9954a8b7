# topmark:header:start
#
#   project      : Py2Rb
#   file         : convert.py
#   file_relpath : src/py2rb/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb `convert` command.

Translates Python source files (or STDIN) into approximate Ruby source.

Input modes:
  * No PATHS, or ``-`` as a PATH: read the source from STDIN.
  * One or more PATHS: translate each file in order. With more than one input,
    each translation is preceded by a ``# ==> PATH <==`` comment line.

Output goes to STDOUT unless ``--output`` names a file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from py2rb.cli.cmd_common import build_config_common, get_effective_verbosity
from py2rb.cli.errors import Py2RbEncodingError, Py2RbIOError, Py2RbUsageError
from py2rb.cli.options import common_config_options
from py2rb.config.logging import get_logger
from py2rb.constants import INPUT_BANNER_PREFIX
from py2rb.core.exit_codes import ExitCode
from py2rb.pipeline.engine import run_for_files, translate_stream

if TYPE_CHECKING:
    from typing import TextIO

    from py2rb.cli.console import ConsoleLike
    from py2rb.config import Config
    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.context import TranslationContext

logger: Py2RbLogger = get_logger(__name__)

STDIN_PATH: str = "-"


@click.command(
    name="convert",
    help="Translate Python source into approximate Ruby source (reads STDIN by default).",
)
@click.argument("paths", nargs=-1, type=str, metavar="[PATHS]...")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the translation to FILE instead of STDOUT.",
)
@common_config_options
def convert_command(
    *,
    paths: tuple[str, ...],
    output_path: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    indent_width: int | None,
) -> None:
    """Translate Python files (or STDIN) to Ruby.

    Args:
        paths: Input files; ``-`` (or no paths at all) reads STDIN.
        output_path: Destination file; STDOUT when omitted.
        no_config: If True, skip discovery of project config files.
        config_paths: Additional TOML config files to merge into the effective config.
        indent_width: Indentation unit override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    inputs: list[str] = list(paths) or [STDIN_PATH]
    if inputs.count(STDIN_PATH) > 1:
        raise Py2RbUsageError("'-' (STDIN) may be given only once.")

    config: Config = build_config_common(
        no_config=no_config, config_paths=config_paths, indent_width=indent_width
    )
    if vlevel <= logging.INFO:
        for diag in config.diagnostics:
            console.warn(f"config: {diag}")

    banner: bool = len(inputs) > 1
    results: list[TranslationContext] = []
    error_code: ExitCode | None = None

    try:
        with click.open_file(output_path or STDIN_PATH, "w", encoding="utf-8") as out:
            for item in inputs:
                if item == STDIN_PATH:
                    results.append(_convert_stdin(out, config, banner=banner))
                    continue
                file_results, code = run_for_files(
                    paths=[Path(item)], config=config, out=out, banner=banner
                )
                results.extend(file_results)
                if code is not None:
                    console.error(f"Error: cannot translate {item} ({code.name.lower()})")
                    error_code = error_code or code
    except OSError as e:
        raise Py2RbIOError(f"Cannot write output: {e}") from e

    if vlevel <= logging.INFO:
        for result in results:
            for diag in result.diagnostics:
                console.warn(f"{result.source}: {diag}")
            # STDOUT carries the translation unless --output is given.
            if output_path:
                console.print(
                    console.styled(
                        f"{result.source}: {result.line_number} line(s) in, "
                        f"{result.lines_emitted} line(s) out",
                        fg="blue",
                    )
                )

    if error_code is not None:
        ctx.exit(error_code)


def _convert_stdin(out: TextIO, config: Config, *, banner: bool) -> TranslationContext:
    if banner:
        out.write(f"{config.comment_prefix} {INPUT_BANNER_PREFIX} <stdin> <==\n")
    stdin: TextIO = click.get_text_stream("stdin", encoding="utf-8")
    try:
        return translate_stream(stdin, out, config, source="<stdin>")
    except UnicodeDecodeError as e:
        raise Py2RbEncodingError(f"Cannot decode STDIN as UTF-8: {e}") from e
