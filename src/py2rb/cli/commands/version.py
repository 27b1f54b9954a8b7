# topmark:header:start
#
#   project      : Py2Rb
#   file         : version.py
#   file_relpath : src/py2rb/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb `version` command.

Prints the current Py2Rb version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from py2rb.constants import PY2RB_VERSION

if TYPE_CHECKING:
    from py2rb.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Py2Rb.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of Py2Rb.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": PY2RB_VERSION}))
    else:
        console.print(console.styled(PY2RB_VERSION, bold=True))
