"""Print stack: emission of resolved tokens."""

from dataclasses import dataclass
from enum import StrEnum

from oppenpy.errors import StructuralError
from oppenpy.log import get_logger
from oppenpy.printer.config import IndentAnchor, PrinterConfig
from oppenpy.printer.indent import IndentGenerator
from oppenpy.printer.ring_buffer import Size
from oppenpy.printer.sink import ErasableSink, OutputSink, as_erasable
from oppenpy.tokens import EOF, Begin, Break, BreakType, End, String, Token, Whitespace

logger = get_logger(__name__)


class PrintMode(StrEnum):
    """How the breaks of an open group are printed."""

    FITS = "fits"
    CONSISTENT = "consistent"
    INCONSISTENT = "inconsistent"


@dataclass(frozen=True, slots=True)
class PrintStackEntry:
    """One open group.

    `offset` is the indentation baseline of the group: the space left on the
    line when anchoring on the end of the previous line, or an absolute column
    when anchoring on the current offset.
    """

    offset: int
    mode: PrintMode


class PrintStack:
    """Builds the output from tokens whose size has been resolved."""

    def __init__(
        self,
        width: int,
        new_line: str,
        config: PrinterConfig,
        indent: IndentGenerator,
        sink: OutputSink,
    ) -> None:
        if config.trim_trailing_whitespaces:
            sink = as_erasable(sink)
        self._items: list[PrintStackEntry] = []
        self._width = width
        self._space = width
        self._new_line = new_line
        self._config = config
        self._indent = indent
        self._sink = sink
        # Erasable characters ending the output: Whitespace tokens and blank indentation.
        self._trailing_whitespace = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def space(self) -> int:
        """Columns left on the current line."""
        return self._space

    @property
    def output(self) -> str:
        return self._sink.getvalue()

    @property
    def is_empty(self) -> bool:
        return not self._items

    def print(self, token: Token, size: Size) -> None:
        match token:
            case Begin():
                self._handle_begin(token, size)
            case End():
                self.pop()
            case Break():
                self._handle_break(token, size)
            case String():
                self._handle_string(token, size)
            case EOF():
                pass
            case _:
                raise ValueError(f"Not a printer token: {token!r}")

    def push(self, entry: PrintStackEntry) -> None:
        self._items.append(entry)

    def pop(self) -> PrintStackEntry:
        if not self._items:
            raise StructuralError("Popping empty print stack")
        return self._items.pop()

    def top(self) -> PrintStackEntry:
        if not self._items:
            raise StructuralError("Accessing empty print stack")
        return self._items[-1]

    def indent(self, amount: int) -> None:
        text = self._indent(max(amount, 0))
        self._write(text, trailing=len(text) - len(text.rstrip()))

    def print_new_line(self, amount: int) -> None:
        self._write(self._new_line)
        self.indent(amount)

    def _handle_begin(self, token: Begin, size: Size) -> None:
        if size <= self._space:
            self.push(PrintStackEntry(0, PrintMode.FITS))
            return

        if token.break_type == BreakType.CONSISTENT:
            mode = PrintMode.CONSISTENT
        else:
            mode = PrintMode.INCONSISTENT

        if self._config.indent_anchor == IndentAnchor.CURRENT_OFFSET:
            offset = token.offset + (self._items[-1].offset if self._items else 0)
        else:
            offset = self._space - token.offset
        self.push(PrintStackEntry(offset, mode))

    def _handle_break(self, token: Break, size: Size) -> None:
        entry = self.top()
        match entry.mode:
            case PrintMode.FITS:
                self._print_unbroken(token)
            case PrintMode.CONSISTENT:
                self._print_broken(token, entry)
            case PrintMode.INCONSISTENT:
                if size > self._space:
                    self._print_broken(token, entry)
                else:
                    self._print_unbroken(token)

    def _print_unbroken(self, token: Break) -> None:
        self._space -= token.width
        self._write(token.value)

    def _print_broken(self, token: Break, entry: PrintStackEntry) -> None:
        if self._config.indent_anchor == IndentAnchor.CURRENT_OFFSET:
            amount = entry.offset + token.offset
            self._space = self._width - amount
        else:
            self._space = entry.offset - token.offset
            amount = self._width - self._space

        line_continuation = token.line_continuation
        if self._config.trim_trailing_whitespaces:
            self._erase_trailing_whitespace()
            line_continuation = line_continuation.rstrip()
        self._write(line_continuation)
        self.print_new_line(amount)

    def _handle_string(self, token: String, size: Size) -> None:
        if size > self._space:
            logger.debug("Token %r overflows the line (%d columns left)", token.value, self._space)
        self._space = max(self._space - size, 0)
        self._write(token.value, trailing=len(token.value) if isinstance(token, Whitespace) else 0)

    def _erase_trailing_whitespace(self) -> None:
        if self._trailing_whitespace and isinstance(self._sink, ErasableSink):
            self._sink.erase(self._trailing_whitespace)
        self._trailing_whitespace = 0

    def _write(self, text: str, *, trailing: int = 0) -> None:
        """Write `text`, whose last `trailing` characters may be erased before a break."""
        if not text:
            return
        if trailing == len(text):
            self._trailing_whitespace += trailing
        else:
            self._trailing_whitespace = trailing
        self._sink.write(text)
