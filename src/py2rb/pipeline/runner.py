# topmark:header:start
#
#   project      : Py2Rb
#   file         : runner.py
#   file_relpath : src/py2rb/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the token rewrite pipeline over one statement."""

from __future__ import annotations

from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger
from py2rb.pipeline.context import RewriteState
from py2rb.pipeline.pipelines import REWRITE_PIPELINE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py2rb.config import SubstitutionTables
    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.steps.base import RewriteStep

logger: Py2RbLogger = get_logger(__name__)


def run(
    text: str,
    tables: SubstitutionTables,
    steps: Sequence[RewriteStep] = REWRITE_PIPELINE,
) -> RewriteState:
    """Execute the rewrite steps sequentially.

    Args:
        text (str): The statement text (no indentation, no trailing markers).
        tables (SubstitutionTables): The substitution tables for this run.
        steps (Sequence[RewriteStep]): Ordered sequence of rewrite steps.

    Returns:
        RewriteState: The final state; ``state.text`` holds the rewritten statement.
    """
    state = RewriteState(text=text, tables=tables)
    for step in steps:
        state = step(state)
    return state
