# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb: a best-effort, line-oriented Python to Ruby source translator.

The public programmatic surface lives in [`py2rb.api`][py2rb.api]; the
command-line interface in [`py2rb.cli.main`][py2rb.cli.main].
"""

from __future__ import annotations
