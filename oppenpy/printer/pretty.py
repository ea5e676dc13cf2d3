"""One-shot entry point."""

from collections.abc import Callable, Iterable

from oppenpy.printer.config import PrinterConfig
from oppenpy.printer.printer import Printer
from oppenpy.printer.sink import OutputSink
from oppenpy.tokens import Token


def pretty_print(
    tokens: Iterable[Token],
    width: int = 80,
    new_line: str = "\n",
    config: PrinterConfig | None = None,
    space: str | Callable[[int], str] = " ",
    sink: OutputSink | None = None,
) -> str:
    """Print a whole token stream and return the output.

    The stream should end with an `EOF`; nothing buffered after the last one
    is printed.
    """
    printer = Printer(width, new_line, config, space, sink)
    return printer.process_all(tokens)
