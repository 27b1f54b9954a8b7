# topmark:header:start
#
#   project      : Py2Rb
#   file         : __main__.py
#   file_relpath : src/py2rb/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Py2Rb via ``python -m py2rb``.

Equivalent to running the ``py2rb`` console script.

Examples:
    Translate a file::

        python -m py2rb convert script.py
"""

from __future__ import annotations

from py2rb.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="py2rb")
