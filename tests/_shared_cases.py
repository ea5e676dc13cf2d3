"""Token streams and builder documents shared by the printer and builder tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from oppenpy.printer import PrinterConfig
from oppenpy.tokens import EOF, Begin, Break, BreakType, End, String, Token
from oppenpy.wadler import Wadler


def words(text: str, begin: Begin | None = None) -> list[Token]:
    """One group holding the words of `text` separated by breakable spaces."""
    tokens: list[Token] = [begin if begin is not None else Begin()]
    for index, word in enumerate(text.split()):
        if index:
            tokens.append(Break())
        tokens.append(String(word))
    tokens.append(End())
    return tokens


def method_chain(break_type: BreakType) -> list[Token]:
    segments = ["hello", ".world", ".foo", ".bar", ".baz", ".42()"]
    tokens: list[Token] = [Begin(break_type=break_type)]
    for index, segment in enumerate(segments):
        if index:
            tokens.append(Break(""))
        tokens.append(String(segment))
    return [*tokens, End(), EOF()]


@dataclass(frozen=True, slots=True)
class PrinterCase:
    name: str
    tokens: tuple[Token, ...]
    width: int
    expected: str
    config: PrinterConfig | None = None


PRINTER_CASES: tuple[PrinterCase, ...] = (
    PrinterCase(
        name="addition_fits",
        tokens=(*words("XXXXXXXXXX + YYYYYYYYYY + ZZZZZZZZZZ"), EOF()),
        width=40,
        expected="XXXXXXXXXX + YYYYYYYYYY + ZZZZZZZZZZ",
    ),
    PrinterCase(
        name="addition_breaks_last_operand",
        tokens=(*words("XXXXXXXXXX + YYYYYYYYYY + ZZZZZZZZZZ"), EOF()),
        width=25,
        expected="XXXXXXXXXX + YYYYYYYYYY +\n  ZZZZZZZZZZ",
    ),
    PrinterCase(
        name="addition_breaks_each_operand",
        tokens=(*words("XXXXXXXXXX + YYYYYYYYYY + ZZZZZZZZZZ"), EOF()),
        width=20,
        expected="XXXXXXXXXX +\n  YYYYYYYYYY +\n  ZZZZZZZZZZ",
    ),
    PrinterCase(name="only_eof", tokens=(EOF(),), width=80, expected=""),
    PrinterCase(name="empty_group", tokens=(Begin(), End(), EOF()), width=80, expected=""),
    PrinterCase(name="bare_string", tokens=(String("XXXXXXXXXX"), EOF()), width=80, expected="XXXXXXXXXX"),
    PrinterCase(
        name="string_in_group",
        tokens=(Begin(), String("XXXXXXXXXX"), End(), EOF()),
        width=80,
        expected="XXXXXXXXXX",
    ),
    PrinterCase(
        name="inconsistent_method_chain",
        tokens=tuple(method_chain(BreakType.INCONSISTENT)),
        width=20,
        expected="hello.world.foo.bar\n  .baz.42()",
    ),
    PrinterCase(
        name="consistent_method_chain",
        tokens=tuple(method_chain(BreakType.CONSISTENT)),
        width=20,
        expected="hello\n  .world\n  .foo\n  .bar\n  .baz\n  .42()",
    ),
    PrinterCase(
        name="string_wider_than_line_is_kept",
        tokens=(Begin(), String("Hello, World!"), End(), EOF()),
        width=5,
        expected="Hello, World!",
    ),
)


@dataclass(frozen=True, slots=True)
class AnchorCase:
    """A builder document printed with both indentation anchors at width 30."""

    name: str
    build: Callable[[Wadler], None]
    expected_oppen: str
    expected_wadler: str


def _lines(*lines: str) -> str:
    return "\n".join(lines)


def _flat_group(indent: int) -> Callable[[Wadler], None]:
    def build(out: Wadler) -> None:
        with out.group(indent=indent):
            out.text("Hello, World!")
            out.line_break()
            out.text("How are you?")
            out.line_break()
            out.text("I am fine and you?")

    return build


def _nested_group(outer: int, inner: int) -> Callable[[Wadler], None]:
    def build(out: Wadler) -> None:
        with out.group(indent=outer):
            out.text("Hello, World!")
            with out.group(indent=inner):
                out.line_break()
                out.text("How are you?")
                out.line_break()
                out.text("I am fine and you?")

    return build


def _sibling_groups(first: int, second: int) -> Callable[[Wadler], None]:
    def build(out: Wadler) -> None:
        with out.group(indent=2):
            out.text("Hello, World!")
            with out.group(indent=first):
                out.line_break()
                out.text("How are you?")
            with out.group(indent=second):
                out.line_break()
                out.text("I am fine and you?")

    return build


def _three_levels(middle: int, inner: int) -> Callable[[Wadler], None]:
    def build(out: Wadler) -> None:
        with out.group(indent=2):
            out.text("Hello, World!")
            with out.group(indent=middle):
                out.line_break()
                out.text("How")
                with out.group(indent=inner):
                    out.line_break()
                    out.text("are")
                    out.line_break()
                    out.text("you?")

    return build


def _break_outside_nested(out: Wadler) -> None:
    with out.group(indent=0):
        out.text("Hello, World!")
        out.line_break()
        with out.group(indent=1):
            out.text("How are you?")
            out.line_break()
            out.text("I am fine and you?")


def _text_outside_nested(out: Wadler) -> None:
    with out.group(indent=0):
        out.text("Hello, World!")
        with out.group(indent=1):
            out.line_break()
            out.text("How are you?")
            out.line_break()
        out.text("I am fine and you?")


def _text_and_break_outside_nested(out: Wadler) -> None:
    with out.group(indent=0):
        out.text("Hello, World!")
        out.line_break()
        with out.group(indent=1):
            out.text("How are you?")
            out.line_break()
        out.text("I am fine and you?")


ANCHOR_CASES: tuple[AnchorCase, ...] = (
    AnchorCase(
        name="flat_group_indent_0",
        build=_flat_group(0),
        expected_oppen=_lines("Hello, World!", "How are you?", "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "How are you?", "I am fine and you?"),
    ),
    AnchorCase(
        name="flat_group_indent_1",
        build=_flat_group(1),
        expected_oppen=_lines("Hello, World!", " How are you?", " I am fine and you?"),
        expected_wadler=_lines("Hello, World!", " How are you?", " I am fine and you?"),
    ),
    AnchorCase(
        name="flat_group_indent_2",
        build=_flat_group(2),
        expected_oppen=_lines("Hello, World!", "  How are you?", "  I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "  How are you?", "  I am fine and you?"),
    ),
    AnchorCase(
        name="nested_indent_2_0",
        build=_nested_group(2, 0),
        expected_oppen=_lines("Hello, World!", " " * 13 + "How are you?", " " * 13 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "  How are you?", "  I am fine and you?"),
    ),
    AnchorCase(
        name="nested_indent_2_1",
        build=_nested_group(2, 1),
        expected_oppen=_lines("Hello, World!", " " * 14 + "How are you?", " " * 14 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "   How are you?", "   I am fine and you?"),
    ),
    AnchorCase(
        name="nested_indent_2_2",
        build=_nested_group(2, 2),
        expected_oppen=_lines("Hello, World!", " " * 15 + "How are you?", " " * 15 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "    How are you?", "    I am fine and you?"),
    ),
    AnchorCase(
        name="nested_indent_0_0",
        build=_nested_group(0, 0),
        expected_oppen=_lines("Hello, World!", " " * 13 + "How are you?", " " * 13 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "How are you?", "I am fine and you?"),
    ),
    AnchorCase(
        name="nested_indent_0_1",
        build=_nested_group(0, 1),
        expected_oppen=_lines("Hello, World!", " " * 14 + "How are you?", " " * 14 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", " How are you?", " I am fine and you?"),
    ),
    AnchorCase(
        name="sibling_groups_same_indent",
        build=_sibling_groups(1, 1),
        expected_oppen=_lines("Hello, World!", " " * 14 + "How are you?", " " * 27 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "   How are you?", "   I am fine and you?"),
    ),
    AnchorCase(
        name="sibling_groups_increasing_indent",
        build=_sibling_groups(1, 2),
        expected_oppen=_lines("Hello, World!", " " * 14 + "How are you?", " " * 28 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "   How are you?", "    I am fine and you?"),
    ),
    AnchorCase(
        name="sibling_groups_decreasing_indent",
        build=_sibling_groups(2, 1),
        expected_oppen=_lines("Hello, World!", " " * 15 + "How are you?", " " * 28 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "    How are you?", "   I am fine and you?"),
    ),
    AnchorCase(
        name="three_levels_same_indent",
        build=_three_levels(2, 2),
        expected_oppen=_lines("Hello, World!", " " * 15 + "How", " " * 20 + "are", " " * 20 + "you?"),
        expected_wadler=_lines("Hello, World!", "    How", "      are", "      you?"),
    ),
    AnchorCase(
        name="three_levels_different_indent",
        build=_three_levels(3, 4),
        expected_oppen=_lines("Hello, World!", " " * 16 + "How", " " * 23 + "are", " " * 23 + "you?"),
        expected_wadler=_lines("Hello, World!", "     How", "         are", "         you?"),
    ),
    AnchorCase(
        name="break_outside_nested",
        build=_break_outside_nested,
        expected_oppen=_lines("Hello, World!", "How are you?", " I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "How are you?", " I am fine and you?"),
    ),
    AnchorCase(
        name="text_outside_nested",
        build=_text_outside_nested,
        expected_oppen=_lines("Hello, World!", " " * 14 + "How are you?", " " * 14 + "I am fine and you?"),
        expected_wadler=_lines("Hello, World!", " How are you?", " I am fine and you?"),
    ),
    AnchorCase(
        name="text_and_break_outside_nested",
        build=_text_and_break_outside_nested,
        expected_oppen=_lines("Hello, World!", "How are you?", " I am fine and you?"),
        expected_wadler=_lines("Hello, World!", "How are you?", " I am fine and you?"),
    ),
)


def case_id(case: PrinterCase | AnchorCase) -> str:
    return case.name
