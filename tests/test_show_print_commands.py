import pytest

from oppenpy.errors import StructuralError
from oppenpy.tokens import EOF, Begin, Break, BreakType, End, String
from oppenpy.wadler import Wadler, tokens_to_wadler

GROUP = "with printer.group(BreakType.CONSISTENT, indent=0):"


def _block(*lines: str) -> str:
    return "\n".join(lines)


def _show(build) -> str:
    out = Wadler()
    build(out)
    return out.show_print_commands(printer_name="printer")


def test_empty_token_list() -> None:
    assert _show(lambda out: None) == _block(GROUP, "    pass")


@pytest.mark.parametrize(
    ("value", "width", "expected"),
    [
        ("Hello World!", None, "printer.text('Hello World!', width=12)"),
        ("\"'Hello World!'\"", None, "printer.text('\"\\'Hello World!\\'\"', width=16)"),
        ("Hello World!", 42, "printer.text('Hello World!', width=42)"),
    ],
    ids=["simple", "quotes", "width"],
)
def test_text(value: str, width: int | None, expected: str) -> None:
    assert _show(lambda out: out.text(value, width=width)) == _block(GROUP, f"    {expected}")


def test_text_with_trailing_whitespace() -> None:
    assert _show(lambda out: out.text("Hello World!  ")) == _block(
        GROUP,
        "    printer.text('Hello World!', width=12)",
        "    printer.text('  ', width=2)",
    )


def test_breaks() -> None:
    def build(out: Wadler) -> None:
        out.line_break()
        out.line_break(line_continuation="##")
        out.breakable()
        out.breakable("**", width=42, line_continuation="##")

    assert _show(build) == _block(
        GROUP,
        "    printer.line_break(line_continuation='')",
        "    printer.line_break(line_continuation='##')",
        "    printer.breakable(' ', width=1, line_continuation='')",
        "    printer.breakable('**', width=42, line_continuation='##')",
    )


def test_group_with_delimiters() -> None:
    def build(out: Wadler) -> None:
        with out.group(BreakType.INCONSISTENT, delim=("{", "}"), indent=2):
            out.text("Hello World!")

    assert _show(build) == _block(
        "with printer.group(BreakType.INCONSISTENT, indent=2):",
        "    printer.line_break(line_continuation='')",
        "    printer.text('{', width=1)",
        "    printer.text('Hello World!', width=12)",
        "    printer.line_break(line_continuation='')",
        "    printer.text('}', width=1)",
    )


def test_nested_groups() -> None:
    def build(out: Wadler) -> None:
        with out.group():
            with out.group():
                with out.group():
                    out.text("Hello World!")

    assert _show(build) == _block(
        GROUP,
        f"    {GROUP}",
        f"        {GROUP}",
        "            printer.text('Hello World!', width=12)",
    )


def test_nests_become_break_offsets() -> None:
    def build(out: Wadler) -> None:
        with out.group(indent=2):
            with out.nest(indent=2):
                with out.group(indent=2):
                    with out.nest(indent=2):
                        out.breakable()
                        out.text("Hello World!")
                        out.line_break()

    assert _show(build) == _block(
        "with printer.group(BreakType.CONSISTENT, indent=2):",
        "    with printer.group(BreakType.CONSISTENT, indent=2):",
        "        with printer.nest(indent=4):",
        "            printer.breakable(' ', width=1, line_continuation='')",
        "        printer.text('Hello World!', width=12)",
        "        with printer.nest(indent=4):",
        "            printer.line_break(line_continuation='')",
    )


def test_base_indent_and_default_printer_name() -> None:
    tokens = [Begin(offset=1), String("a"), Break(), End(), EOF()]

    assert tokens_to_wadler(tokens, base_indent=2) == _block(
        "  with out.group(BreakType.INCONSISTENT, indent=1):",
        "      out.text('a', width=1)",
        "      out.breakable(' ', width=1, line_continuation='')",
    )


def test_unmatched_end_is_rejected() -> None:
    with pytest.raises(StructuralError, match="End"):
        tokens_to_wadler([String("a"), End()])
