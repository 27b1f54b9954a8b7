# topmark:header:start
#
#   project      : Py2Rb
#   file         : __init__.py
#   file_relpath : src/py2rb/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Py2Rb configuration package.

Exposes the immutable runtime [`Config`][py2rb.config.model.Config], its mutable
builder [`MutableConfig`][py2rb.config.model.MutableConfig] and the
[`SubstitutionTables`][py2rb.config.tables.SubstitutionTables] consumed by the
rewrite engine.
"""

from __future__ import annotations

from .model import Config, MutableConfig
from .tables import SubstitutionTables, TableKind

__all__ = [
    "Config",
    "MutableConfig",
    "SubstitutionTables",
    "TableKind",
]
