# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for Py2Rb."""
