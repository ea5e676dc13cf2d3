"""Render a token stream as the builder calls that produce it.

Handy to inspect what a black-box formatter feeds the printer: the result is
Python source using a `Wadler` instance named `printer_name`.
"""

from collections.abc import Iterable

from oppenpy.errors import StructuralError
from oppenpy.tokens import EOF, Begin, Break, End, LineBreak, String, Token
from oppenpy.wadler.builder import Wadler

COMMAND_INDENT = 4


def _command_lines(tokens: Iterable[Token], printer_name: str) -> list[tuple[int, str]]:
    lines: list[tuple[int, str]] = []
    # One flag per open group: whether anything was rendered inside it.
    open_groups: list[bool] = []

    def emit(line: str) -> None:
        if open_groups:
            open_groups[-1] = True
        lines.append((len(open_groups), line))

    for token in tokens:
        match token:
            case Begin():
                emit(f"with {printer_name}.group(BreakType.{token.break_type.name}, indent={token.offset}):")
                open_groups.append(False)
            case End():
                if not open_groups:
                    raise StructuralError("End token without a matching Begin")
                if not open_groups.pop():
                    lines.append((len(open_groups) + 1, "pass"))
            case String():
                emit(f"{printer_name}.text({token.value!r}, width={token.width})")
            case Break():
                if isinstance(token, LineBreak):
                    command = f"{printer_name}.line_break(line_continuation={token.line_continuation!r})"
                else:
                    command = (
                        f"{printer_name}.breakable({token.value!r}, width={token.width}, "
                        f"line_continuation={token.line_continuation!r})"
                    )
                if token.offset > 0:
                    emit(f"with {printer_name}.nest(indent={token.offset}):")
                    lines.append((len(open_groups) + 1, command))
                else:
                    emit(command)
            case EOF():
                pass
            case _:
                raise ValueError(f"Not a printer token: {token!r}")

    while open_groups:
        if not open_groups.pop():
            lines.append((len(open_groups) + 1, "pass"))
    return lines


def tokens_to_wadler(
    tokens: Iterable[Token],
    base_indent: int = 0,
    printer_name: str = "out",
    width: int = 80,
) -> str:
    """Return the `Wadler` calls rebuilding `tokens`, one statement per line.

    Every statement after the first is indented by `base_indent` plus four
    columns per enclosing block.
    """
    out = Wadler(base_indent=base_indent, indent=COMMAND_INDENT, width=width)
    for number, (depth, line) in enumerate(_command_lines(tokens, printer_name)):
        with out.nest(indent=depth * COMMAND_INDENT):
            if number == 0:
                out.text(" " * base_indent + line)
            else:
                out.line_break()
                out.text(line)
    return out.output()
