# topmark:header:start
#
#   project      : Py2Rb
#   file         : base.py
#   file_relpath : src/py2rb/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based token rewrite steps.

The runner invokes steps as *callables*. `RewriteStep` implements the common
lifecycle:

    state = step(state)  # internally: may_proceed → run?

Each step replaces ``state.text``; the runner feeds the result to the next step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from py2rb.config.logging import get_logger

if TYPE_CHECKING:
    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.context import RewriteState

logger: Py2RbLogger = get_logger(__name__)


@dataclass
class RewriteStep:
    """Reusable foundation for token rewrite steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``
    and ``rewrite()``. Do not override ``__call__`` unless you need custom
    lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs and ``RewriteState.applied``.
    """

    name: str

    def __call__(self, state: RewriteState) -> RewriteState:
        """Invoke the step lifecycle: gate → rewrite (if allowed).

        Args:
            state (RewriteState): The statement being rewritten.

        Returns:
            RewriteState: The same state instance, with ``text`` replaced.
        """
        if not self.may_proceed(state):
            logger.trace("RewriteStep %s skipped: %r", self.name, state.text)
            return state

        before: str = state.text
        state.text = self.rewrite(state)
        if state.text != before:
            state.applied.append(self.name)
            logger.debug("RewriteStep %s: %r -> %r", self.name, before, state.text)
        return state

    def may_proceed(self, state: RewriteState) -> bool:
        """Return whether the step should run for this statement.

        Default: ``True`` (always run).

        Args:
            state (RewriteState): The statement being rewritten.

        Returns:
            bool: True to call ``rewrite()``, False to skip.
        """
        return True

    def rewrite(self, state: RewriteState) -> str:
        """Return the rewritten statement text.

        Subclasses must implement this method.

        Args:
            state (RewriteState): The statement being rewritten.

        Returns:
            str: The new text.
        """
        raise NotImplementedError
