"""Oppen's streaming pretty-printer: the scanning phase.

Tokens are buffered in a ring until the width of the group or break they
belong to is known (or known to exceed the line), then handed to the print
stack. Provisional sizes are stored negated (`-right_total` at the time the
token was seen) and resolved by adding the `right_total` of the closing point.
"""

import math
from collections.abc import Callable, Iterable

from oppenpy.errors import CapacityExceededError, InvalidConfigurationError
from oppenpy.log import get_logger
from oppenpy.printer.config import PrinterConfig
from oppenpy.printer.indent import make_indent_generator
from oppenpy.printer.print_stack import PrintStack
from oppenpy.printer.ring_buffer import TokenRing
from oppenpy.printer.scan_stack import ScanStack
from oppenpy.printer.sink import OutputSink, StringSink
from oppenpy.tokens import EOF, Begin, Break, End, String, Token, Whitespace

logger = get_logger(__name__)

BUFFER_FACTOR = 3


class Printer:
    """Feeds tokens one at a time and builds the pretty-printed output.

    The buffers hold `3 * width` entries; when they are exhausted either
    `CapacityExceededError` is raised or, with `PrinterConfig.upsize_stack`,
    they are tripled.
    """

    def __init__(
        self,
        width: int,
        new_line: str = "\n",
        config: PrinterConfig | None = None,
        space: str | Callable[[int], str] = " ",
        sink: OutputSink | None = None,
    ) -> None:
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise InvalidConfigurationError(f"width must be a positive integer, got {width!r}")
        self._config = config if config is not None else PrinterConfig.oppen()
        capacity = BUFFER_FACTOR * width
        self._ring = TokenRing(capacity)
        self._scan_stack = ScanStack(capacity, growable=self._config.upsize_stack)
        self._print_stack = PrintStack(
            width,
            new_line,
            self._config,
            make_indent_generator(space),
            sink if sink is not None else StringSink(),
        )
        self._left_total = 1
        self._right_total = 1
        # Width of the Whitespace tokens seen since the last String.
        self._whitespace_run = 0

    @property
    def config(self) -> PrinterConfig:
        return self._config

    @property
    def output(self) -> str:
        return self._print_stack.output

    @property
    def left(self) -> int:
        return self._ring.left

    @property
    def right(self) -> int:
        return self._ring.right

    @property
    def left_total(self) -> int | float:
        return self._left_total

    @property
    def right_total(self) -> int | float:
        return self._right_total

    @property
    def scan_stack(self) -> ScanStack:
        return self._scan_stack

    @property
    def print_stack(self) -> PrintStack:
        return self._print_stack

    def process(self, token: Token) -> None:
        match token:
            case EOF():
                self._handle_eof()
            case Begin():
                self._handle_begin(token)
            case End():
                self._handle_end(token)
            case Break():
                self._handle_break(token)
            case Whitespace():
                self._whitespace_run += token.width
                self._handle_string(token)
            case String():
                self._whitespace_run = 0
                self._handle_string(token)
            case _:
                raise ValueError(f"Not a printer token: {token!r}")

    def process_all(self, tokens: Iterable[Token]) -> str:
        for token in tokens:
            self.process(token)
        return self.output

    def _reset(self) -> None:
        self._ring.reset()
        self._left_total = 1
        self._right_total = 1

    def _handle_eof(self) -> None:
        if not self._scan_stack.is_empty:
            self._check_stack(0)
            self._advance_left()
        self._print_stack.indent(0)

    def _handle_begin(self, token: Begin) -> None:
        if self._scan_stack.is_empty:
            self._reset()
        else:
            self._advance_right()
        self._ring.put(token, -self._right_total)
        self._scan_stack.push(self._ring.right)

    def _handle_end(self, token: End) -> None:
        if self._scan_stack.is_empty:
            self._print_stack.print(token, 0)
            return

        self._advance_right()
        # Negative until the group is resolved, so the flush never hands it over early.
        self._ring.put(token, -1)
        self._scan_stack.push(self._ring.right)
        if self._config.eager_print and self._right_total - self._left_total < self._print_stack.space:
            self._check_stack(0)
            self._advance_left()

    def _handle_break(self, token: Break) -> None:
        if self._scan_stack.is_empty:
            self._reset()
        else:
            self._advance_right()
        self._check_stack(0)
        self._scan_stack.push(self._ring.right)
        self._ring.put(token, -self._right_total)
        self._right_total += token.width

    def _handle_string(self, token: String) -> None:
        if self._scan_stack.is_empty:
            self._print_stack.print(token, token.width)
            return

        self._advance_right()
        self._ring.put(token, token.width)
        self._right_total += token.width
        if self._whitespace_run == 0:
            self._check_stream()

    def _check_stack(self, depth: int) -> None:
        """Resolve the sizes of the pending tokens closed by the current position."""
        ring = self._ring
        stack = self._scan_stack
        while not stack.is_empty:
            index = stack.top
            match ring.token(index):
                case Begin():
                    if depth <= 0:
                        return
                    stack.pop()
                    ring.set_size(index, ring.size(index) + self._right_total)
                    depth -= 1
                case End():
                    stack.pop()
                    ring.set_size(index, 1)
                    depth += 1
                case _:
                    stack.pop()
                    ring.set_size(index, ring.size(index) + self._right_total)
                    if depth <= 0:
                        return

    def _check_stream(self) -> None:
        """Print buffered tokens while the pending text cannot fit on the line."""
        ring = self._ring
        stack = self._scan_stack
        while self._right_total - self._left_total > self._print_stack.space:
            if not stack.is_empty and ring.left == stack.bottom:
                ring.set_size(stack.pop_bottom(), math.inf)
            self._advance_left()
            if ring.is_drained:
                return

    def _advance_right(self) -> None:
        if self._ring.advance_right():
            return
        if not self._config.upsize_stack:
            raise CapacityExceededError("Token queue full", capacity=self._ring.capacity)
        rotation, old_capacity = self._ring.grow()
        self._scan_stack.rebase(rotation, old_capacity)
        logger.debug("Token ring grown from %d to %d entries", old_capacity, self._ring.capacity)

    def _advance_left(self) -> None:
        """Hand resolved tokens from the left of the ring to the print stack."""
        ring = self._ring
        while True:
            token = ring.token(ring.left)
            size = ring.size(ring.left)
            if size < 0:
                return
            self._print_stack.print(token, size)
            match token:
                case Break():
                    self._left_total += token.width
                case String():
                    self._left_total += size
            if ring.is_drained:
                return
            ring.advance_left()
