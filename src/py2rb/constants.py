# topmark:header:start
#
#   project      : Py2Rb
#   file         : constants.py
#   file_relpath : src/py2rb/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PY2RB_VERSION: str = get_version("py2rb")

# Config discovery in the working directory:
PY2RB_TOML_NAME: str = "py2rb.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "py2rb"

# Class name used for static definitions seen before any class header
UNKNOWN_CLASS_NAME: str = "???"

# Banner prefix used when several inputs are written to one output stream
INPUT_BANNER_PREFIX: str = "==>"

VALUE_NOT_SET: str = "<not set>"
