# topmark:header:start
#
#   project      : Py2Rb
#   file         : test_assembler.py
#   file_relpath : tests/pipeline/test_assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests of the logical-line assembler on small programs."""

from __future__ import annotations

from py2rb.core.diagnostics import DiagnosticLevel
from py2rb.pipeline.status import AssemblerState
from tests.conftest import make_config
from tests.pipeline.conftest import translate, translate_with_context


def test_method_definition_drops_self() -> None:
    assert translate("def f(self, x):\n") == ["def f (x)"]


def test_dedent_to_sibling_emits_one_terminator() -> None:
    source = "if x:\n    y = 1\nz = 2\n"
    assert translate(source) == ["if x", "    y = 1", "end", "z = 2"]


def test_except_as_becomes_rescue_without_closing_the_begin_block() -> None:
    source = "try:\n    f()\nexcept ValueError as e:\n    pass\n"
    assert translate(source) == ["begin", "    f()", "rescue ValueError => e", "    pass", "end"]


def test_len_call_becomes_length_method() -> None:
    assert translate("n = len(items)\n") == ["n = items.length"]


def test_mapped_call_nested_in_parens_is_rewritten() -> None:
    source = "print(len(items))\nif (len(items) > 0):\n    x\n"
    assert translate(source) == ["print(items.length)", "if (items.length > 0)", "    x", "end"]


def test_static_method_is_defined_on_the_class() -> None:
    source = (
        "class Dog(Animal):\n"
        "    @staticmethod\n"
        "    def bark(self):\n"
        "        return 1\n"
    )
    assert translate(source) == [
        "class Dog < Animal",
        "    def Dog.bark",
        "        return 1",
        "    end",
        "end",
    ]


def test_block_string_becomes_comment_lines_at_its_indentation() -> None:
    source = (
        "def f():\n"
        '    """First line\n'
        "    second line\n"
        '    last line"""\n'
        "    return 1\n"
    )
    lines, ctx = translate_with_context(source)
    assert lines == [
        "def f",
        "    # First line",
        "    # second line",
        "    # last line",
        "    return 1",
        "end",
    ]
    assert len(ctx.diagnostics) == 0


def test_single_line_block_string() -> None:
    assert translate("'''Module docstring.'''\nx = 1\n") == ["# Module docstring.", "x = 1"]


def test_block_string_body_is_not_rewritten_or_measured() -> None:
    source = "if a:\n    b\n    '''\ndef None(self):\n    '''\n    c\n"
    assert translate(source) == [
        "if a",
        "    b",
        "    #",
        "    # def None(self):",
        "    #",
        "    c",
        "end",
    ]


def test_unterminated_block_string_is_reported_and_emitted() -> None:
    lines, ctx = translate_with_context("'''never closed\ntext\n")
    assert lines == ["# never closed", "# text"]
    [diag] = list(ctx.diagnostics)
    assert diag.level is DiagnosticLevel.WARNING
    assert diag.line == 1
    assert ctx.state is AssemblerState.NORMAL


def test_blank_lines_come_after_terminators() -> None:
    source = "if a:\n    b\n\n\nc\n"
    assert translate(source) == ["if a", "    b", "end", "", "", "c"]


def test_blank_lines_take_the_next_statement_indent() -> None:
    source = "def f():\n    a\n\n    b\n"
    assert translate(source) == ["def f", "    a", "    ", "    b", "end"]


def test_trailing_blank_lines_are_flushed_after_final_terminators() -> None:
    assert translate("if a:\n    b\n\n") == ["if a", "    b", "end", ""]


def test_continuation_lines_pass_through_unchanged() -> None:
    source = "x = foo(a, \\\n        len(b))\ny = None\n"
    assert translate(source) == ["x = foo(a,\\", "        len(b))", "y = nil"]


def test_continuation_lines_do_not_close_blocks() -> None:
    source = "if a:\n    x = 1 + \\\n2\n    y = 2\n"
    assert translate(source) == ["if a", "    x = 1 +\\", "2", "    y = 2", "end"]


def test_continuation_chain_ends_at_line_without_marker() -> None:
    lines, ctx = translate_with_context("a = 1 + \\\n    2 + \\\n    3\nb = 4\n")
    assert lines == ["a = 1 +\\", "    2 + \\", "    3", "b = 4"]
    assert not ctx.in_continuation


def test_dangling_continuation_marker_is_reported() -> None:
    lines, ctx = translate_with_context("a = 1 + \\\n")
    assert lines == ["a = 1 +\\"]
    assert [d.level for d in ctx.diagnostics] == [DiagnosticLevel.WARNING]


def test_if_elif_else_chain() -> None:
    source = (
        "if a:\n"
        "    x = 1\n"
        "elif b:\n"
        "    x = 2\n"
        "else:\n"
        "    x = 3\n"
    )
    assert translate(source) == [
        "if a",
        "    x = 1",
        "elsif b",
        "    x = 2",
        "else",
        "    x = 3",
        "end",
    ]


def test_finally_continues_the_block_by_default() -> None:
    source = "try:\n    a\nfinally:\n    b\n"
    assert translate(source) == ["begin", "    a", "ensure", "    b", "end"]


def test_continuation_keywords_are_configurable() -> None:
    config = make_config(layout={"continuation_keywords": ["else", "except"]})
    source = "try:\n    a\nfinally:\n    b\n"
    assert translate(source, config) == ["begin", "    a", "end", "ensure", "    b", "end"]


def test_nested_blocks_close_in_order() -> None:
    source = "def f():\n    if x:\n        y\nz\n"
    assert translate(source) == ["def f", "    if x", "        y", "    end", "end", "z"]


def test_flat_input_gets_no_terminators() -> None:
    assert translate("a = 1\nb = 2\n") == ["a = 1", "b = 2"]


def test_tab_indented_block_uses_tab_stop_width() -> None:
    source = "if a:\n\tb\nc\n"
    assert translate(source) == ["if a", "        b", "    end", "end", "c"]


def test_two_space_indentation_with_matching_unit() -> None:
    config = make_config(layout={"indent_width": 2})
    source = "if a:\n  if b:\n    c\nd\n"
    assert translate(source, config) == ["if a", "  if b", "    c", "  end", "end", "d"]


def test_decorator_lines_are_suppressed() -> None:
    source = "class A:\n    @property\n    def size(self):\n        return self._n\n"
    assert translate(source) == ["class A", "    def size", "        return @n", "    end", "end"]


def test_statement_emptied_by_rewrites_counts_as_blank() -> None:
    config = make_config(reserved_words={"pass": ""})
    source = "if a:\n    pass\nb\n"
    assert translate(source, config) == ["if a", "", "b"]


def test_crlf_line_endings_are_accepted() -> None:
    from py2rb.config import MutableConfig
    from py2rb.pipeline.assembler import translate_lines
    from py2rb.pipeline.context import TranslationContext

    ctx = TranslationContext.bootstrap(MutableConfig.from_defaults().freeze())
    lines = list(translate_lines(["if a:\r\n", "    b\r\n"], ctx))
    assert lines == ["if a", "    b", "end"]
