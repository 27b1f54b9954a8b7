# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb CLI subcommands."""
