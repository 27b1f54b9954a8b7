# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb translation pipeline.

Modules:
    indent: measure and split leading whitespace.
    assembler: the per-line state machine.
    terminators: synthetic block terminators and blank-line release.
    steps / pipelines / runner: token rewrites.
    statements: first-match statement dispatch.
    engine: stream and file helpers shared by the API and the CLI.
"""
