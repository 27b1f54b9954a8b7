# topmark:header:start
#
#   project      : Py2Rb
#   file         : engine.py
#   file_relpath : src/py2rb/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for translating streams and files (engine layer).

This module provides small, CLI-free functions that run the assembler over a
text stream or a list of files. Both the public API and the CLI share them.

Design goals:
  - No CLI dependencies: do not import Click or anything under ``py2rb.cli.*``
    from here. Presentation (colors, exit) belongs to the CLI layer.
  - Structured results: return the `TranslationContext` of each translation,
    plus an optional `ExitCode` summarizing any error encountered.
  - Logging only: error conditions are logged via the package logger; callers
    decide how to surface them.

Typical usage:

    results, err = run_for_files(paths=files, config=cfg, out=sys.stdout)
    if err is not None:
        # CLI maps this to a process exit; API callers may handle it differently.
        ...
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger
from py2rb.constants import INPUT_BANNER_PREFIX
from py2rb.core.exit_codes import ExitCode
from py2rb.pipeline.assembler import translate_lines
from py2rb.pipeline.context import TranslationContext

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path
    from typing import TextIO

    from py2rb.config import Config
    from py2rb.config.logging import Py2RbLogger

logger: Py2RbLogger = get_logger(__name__)


def translate_stream(
    lines: Iterable[str],
    out: TextIO,
    config: Config,
    *,
    source: str = "<stream>",
) -> TranslationContext:
    """Translate ``lines`` and write the result to ``out``, one output line at a time.

    Args:
        lines (Iterable[str]): Input lines (e.g. an open text file or ``sys.stdin``).
        out (TextIO): Destination text stream.
        config (Config): Effective configuration.
        source (str): Name of the input for logs and diagnostics.

    Returns:
        TranslationContext: The context at end of stream (diagnostics, counters).
    """
    ctx: TranslationContext = TranslationContext.bootstrap(config, source=source)
    for line in translate_lines(lines, ctx):
        out.write(line + "\n")
    for diag in ctx.diagnostics:
        logger.info("%s: %s", source, diag)
    return ctx


def run_for_files(
    *,
    paths: list[Path],
    config: Config,
    out: TextIO,
    banner: bool = False,
) -> tuple[list[TranslationContext], ExitCode | None]:
    """Translate each file to ``out`` and return (results, encountered_error_code).

    Each file is read completely before any of its output is written, so a file
    that cannot be read or decoded produces no partial output.

    Args:
        paths: Files to translate, in order.
        config: Effective configuration.
        out: Destination text stream shared by all files.
        banner: Write a ``# ==> path <==`` comment line before each file's output.

    Returns:
        tuple[list[TranslationContext], ExitCode | None]: A pair ``(results, error_code)``
            where ``results`` holds one context per file translated and ``error_code``
            is ``None`` if no error occurred, otherwise the first encountered
            non-success exit code.

    Exit code mapping:
        FILE_NOT_FOUND
            Missing path, or a directory where a file was expected
            (`FileNotFoundError`, `IsADirectoryError`).
        PERMISSION_DENIED
            Insufficient permissions (`PermissionError`).
        ENCODING_ERROR
            The input cannot be decoded as UTF-8 (`UnicodeDecodeError`).
        PIPELINE_ERROR
            Any other unexpected exception.

    Notes:
        This helper never prints diagnostics; it only logs. Remaining files are
        still processed after an error.
    """
    results: list[TranslationContext] = []
    encountered_error_code: ExitCode | None = None

    for path in paths:
        try:
            text: str = path.read_text(encoding="utf-8")
            if banner:
                out.write(f"{config.comment_prefix} {INPUT_BANNER_PREFIX} {path} <==\n")
            ctx: TranslationContext = translate_stream(
                io.StringIO(text), out, config, source=str(path)
            )
            results.append(ctx)
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.error("File not found: %s (%s)", path, e)
            encountered_error_code = encountered_error_code or ExitCode.FILE_NOT_FOUND
            continue
        except PermissionError as e:
            logger.error("Permission denied: %s (%s)", path, e)
            encountered_error_code = encountered_error_code or ExitCode.PERMISSION_DENIED
            continue
        except UnicodeDecodeError as e:
            logger.error("Encoding error while reading %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.ENCODING_ERROR
            continue
        except Exception as e:  # pragma: no cover
            logger.exception("Unexpected error translating %s: %s", path, e)
            encountered_error_code = encountered_error_code or ExitCode.PIPELINE_ERROR
            continue

    return results, encountered_error_code
