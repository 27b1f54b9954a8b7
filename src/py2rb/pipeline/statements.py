# topmark:header:start
#
#   project      : Py2Rb
#   file         : statements.py
#   file_relpath : src/py2rb/pipeline/statements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Statement-shape dispatch.

After the token rewrites, a statement is matched against an ordered list of
[`StatementRule`][py2rb.pipeline.statements.StatementRule] entries. The first
rule whose pattern matches decides the output; a statement that matches no
rule is emitted as rewritten. Adding a rule means appending an entry to
`STATEMENT_RULES`, without touching the dispatcher.

A rule transform may update the translation context (the last class seen, the
pending decorator flags) and may suppress the line by returning ``None``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from py2rb.config.logging import get_logger
from py2rb.config.tables import TableKind

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from py2rb.config.logging import Py2RbLogger
    from py2rb.pipeline.context import TranslationContext

logger: Py2RbLogger = get_logger(__name__)


@dataclass(frozen=True)
class StatementRule:
    """One statement shape and its rewrite.

    Attributes:
        name (str): Rule identifier, used in logs and `StatementResult.rule`.
        pattern (re.Pattern[str]): Matched at the start of the statement text.
        transform (Callable[[re.Match[str], TranslationContext], str | None]):
            Returns the new statement text, or ``None`` to suppress the line.
    """

    name: str
    pattern: re.Pattern[str]
    transform: Callable[[re.Match[str], TranslationContext], str | None]


@dataclass(frozen=True)
class StatementResult:
    """Outcome of `dispatch_statement`.

    Attributes:
        text (str | None): The statement to emit; ``None`` when suppressed.
        rule (str | None): Name of the matching rule; ``None`` when no rule matched.
    """

    text: str | None
    rule: str | None = None

    @property
    def suppressed(self) -> bool:
        """Return True when the line must not be emitted."""
        return self.text is None


# ------------------------------ Transforms ------------------------------


def _require(m: re.Match[str], ctx: TranslationContext) -> str:
    return "require" + m.string[m.end() :]


def _require_module(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"require {m.group(1)}"


def _class_with_base(m: re.Match[str], ctx: TranslationContext) -> str:
    ctx.current_class_name = m.group(1)
    return f"class {m.group(1)} < {m.group(2)}"


def _class_bare(m: re.Match[str], ctx: TranslationContext) -> str:
    ctx.current_class_name = m.group(1)
    return m.string


def _mark_static(m: re.Match[str], ctx: TranslationContext) -> None:
    ctx.next_method_is_static = True
    return None


def _mark_property(m: re.Match[str], ctx: TranslationContext) -> None:
    ctx.next_method_is_property = True
    return None


def _definition(m: re.Match[str], ctx: TranslationContext) -> str:
    """Render a method definition header.

    Special member names go through the ``special_methods`` table. A pending
    static flag makes the class the receiver (``def Shape.origin``) and drops a
    leading ``cls``; a leading ``self`` is always dropped. Both pending decorator
    flags are consumed.
    """
    name: str = m.group(1)
    name = ctx.config.tables.lookup(TableKind.SPECIAL_METHODS, name) or name

    params: list[str] = [p.strip() for p in m.group(2).split(",") if p.strip()]
    receivers: tuple[str, ...] = ("self",)
    if ctx.next_method_is_static:
        name = f"{ctx.current_class_name}.{name}"
        receivers = ("self", "cls")
    if params and params[0] in receivers:
        params = params[1:]

    ctx.next_method_is_static = False
    ctx.next_method_is_property = False

    if not params:
        return f"def {name}"
    return f"def {name} ({', '.join(params)})"


def _fixed(text: str) -> Callable[[re.Match[str], TranslationContext], str]:
    def transform(m: re.Match[str], ctx: TranslationContext) -> str:
        return text

    return transform


def _rescue_as(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"rescue {m.group(1)} => {m.group(2)}"


def _rescue_type(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"rescue {m.group(1)}"


def _with_as(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"{m.group(1)} do |{m.group(2)}|"


def _with(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"{m.group(1)} do"


def _assert(m: re.Match[str], ctx: TranslationContext) -> str:
    return f"fail unless {m.group(1)}"


# ------------------------------- Rules -------------------------------

STATEMENT_RULES: Final[tuple[StatementRule, ...]] = (
    StatementRule("import", re.compile(r"import\b"), _require),
    StatementRule("from_import", re.compile(r"from\s+([\w.]+)\s+import\b.*$"), _require_module),
    StatementRule(
        "class_with_base",
        re.compile(r"class\s+(\w+)\s*\(\s*([\w.]+)\s*\)$"),
        _class_with_base,
    ),
    StatementRule("class", re.compile(r"class\s+(\w+)"), _class_bare),
    StatementRule("static_decorator", re.compile(r"@(?:staticmethod|classmethod)$"), _mark_static),
    StatementRule("property_decorator", re.compile(r"@property$"), _mark_property),
    StatementRule("def", re.compile(r"def\s+(\w+)\s*\((.*)\)$"), _definition),
    StatementRule("try", re.compile(r"try$"), _fixed("begin")),
    StatementRule(
        "except_as",
        re.compile(r"except\s+([\w.]+)\s*(?:,|\s+as\b)\s*(\w+)$"),
        _rescue_as,
    ),
    StatementRule("except_type", re.compile(r"except\s+([\w.]+)$"), _rescue_type),
    StatementRule("except", re.compile(r"except$"), _fixed("rescue")),
    StatementRule("finally", re.compile(r"finally$"), _fixed("ensure")),
    StatementRule("with_as", re.compile(r"with\s+(.+?)\s+as\s+(\w+)$"), _with_as),
    StatementRule("with", re.compile(r"with\s+(.+)$"), _with),
    StatementRule("assert", re.compile(r"assert\s*\((.*)\)$"), _assert),
)


def dispatch_statement(
    text: str,
    ctx: TranslationContext,
    rules: Sequence[StatementRule] = STATEMENT_RULES,
) -> StatementResult:
    """Apply the first matching statement rule.

    Args:
        text (str): The token-rewritten statement (no indentation, no trailing markers).
        ctx (TranslationContext): The translation context; rules may update it.
        rules (Sequence[StatementRule]): Ordered rules; the first match wins.

    Returns:
        StatementResult: The statement to emit (or suppression) and the matching rule.
    """
    for rule in rules:
        m: re.Match[str] | None = rule.pattern.match(text)
        if m is None:
            continue
        out: str | None = rule.transform(m, ctx)
        logger.debug("Line %d: statement rule %s: %r -> %r", ctx.line_number, rule.name, text, out)
        return StatementResult(text=out, rule=rule.name)
    return StatementResult(text=text)
