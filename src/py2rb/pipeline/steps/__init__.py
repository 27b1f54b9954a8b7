# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token rewrite steps for the Py2Rb pipeline.

Each step is a `RewriteStep` subclass; the ordered sequence lives in
[`py2rb.pipeline.pipelines`][py2rb.pipeline.pipelines].
"""
