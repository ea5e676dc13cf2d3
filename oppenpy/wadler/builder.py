"""Structured-document builder producing printer token streams."""

import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from enum import StrEnum

from oppenpy.errors import InvalidConfigurationError
from oppenpy.printer import OutputSink, PrinterConfig, pretty_print
from oppenpy.tokens import (
    EOF,
    Begin,
    Break,
    BreakType,
    End,
    LineBreak,
    String,
    Token,
    Whitespace,
    begin_consistent,
    begin_inconsistent,
)

type Delimiter = str | Sequence[str] | None


class BreakPosition(StrEnum):
    """Where `Wadler.separate` puts the breakable relative to the separator."""

    BEFORE = "before"
    AFTER = "after"


def _split_delimiter(delim: Delimiter) -> tuple[str, str]:
    match delim:
        case None:
            return "", ""
        case str():
            return delim, delim
        case _:
            pair = list(delim)[:2]
            if any(not isinstance(item, str) for item in pair):
                raise InvalidConfigurationError(f"Delimiters must be strings, got {delim!r}")
            pair += [""] * (2 - len(pair))
            return pair[0], pair[1]


class Wadler:
    """Builds a token stream from nested groups, nests, texts and breaks.

    Breaks carry the nesting accumulated by `nest` as their offset; groups
    carry their own `indent`. `output()` closes the stream and prints it.
    """

    def __init__(
        self,
        *,
        base_indent: int = 0,
        config: PrinterConfig | None = None,
        indent: int = 0,
        new_line: str = "\n",
        sink: OutputSink | None = None,
        space: str | Callable[[int], str] = " ",
        whitespace: str = " ",
        width: int = 80,
    ) -> None:
        if not whitespace:
            raise InvalidConfigurationError("whitespace cannot be empty")
        self.config = config if config is not None else PrinterConfig.wadler()
        self.current_indent = base_indent
        self.indent = indent
        self.new_line = new_line
        self.sink = sink
        self.space = space
        self.whitespace = whitespace
        self.width = width
        self.tokens: list[Token] = []
        self._trailing_whitespace = re.compile(f"((?:{re.escape(whitespace)})+)\\Z")

    def output(self) -> str:
        """Print the tokens built so far and return the result."""
        self._add_missing_begin_and_end()
        return pretty_print(
            self.tokens,
            width=self.width,
            new_line=self.new_line,
            config=self.config,
            space=self.space,
            sink=self.sink,
        )

    def show_print_commands(self, base_indent: int = 0, printer_name: str = "out") -> str:
        """Render the builder calls that reproduce the current token stream."""
        from oppenpy.wadler.commands import tokens_to_wadler

        self._add_missing_begin_and_end()
        return tokens_to_wadler(self.tokens, base_indent=base_indent, printer_name=printer_name)

    def _add_missing_begin_and_end(self) -> None:
        if not self.tokens or not isinstance(self.tokens[0], Begin):
            self.tokens.insert(0, begin_consistent(offset=0))
            self.tokens.append(End())
        if not isinstance(self.tokens[-1], EOF):
            self.tokens.append(EOF())

    @contextmanager
    def group(
        self,
        break_type: BreakType = BreakType.CONSISTENT,
        *,
        delim: Delimiter = None,
        indent: int | None = None,
    ) -> Iterator[None]:
        """Open a group; its breaks are decided together (consistent) or one by one.

        A left delimiter is printed on its own line after the group opens, a
        right one on its own line before it closes.
        """
        left, right = _split_delimiter(delim)
        offset = self.indent if indent is None else indent
        if break_type == BreakType.CONSISTENT:
            self.tokens.append(begin_consistent(offset=offset))
        else:
            self.tokens.append(begin_inconsistent(offset=offset))

        if left:
            self.line_break()
            self.text(left)

        yield

        if right:
            self.line_break()
            self.text(right)
        self.tokens.append(End())

    def consistent(self, *, delim: Delimiter = None, indent: int | None = None):
        return self.group(BreakType.CONSISTENT, delim=delim, indent=indent)

    def inconsistent(self, *, delim: Delimiter = None, indent: int | None = None):
        return self.group(BreakType.INCONSISTENT, delim=delim, indent=indent)

    @contextmanager
    def nest(self, *, delim: Delimiter = None, indent: int | None = None) -> Iterator[None]:
        """Indent the breaks built inside the block.

        Unlike a group, a nest takes no breaking decision of its own: its
        breaks belong to the enclosing group.
        """
        left, right = _split_delimiter(delim)
        amount = self.indent if indent is None else indent
        self.current_indent += amount

        if left:
            self.text(left)
            self.line_break()

        try:
            yield
        finally:
            self.current_indent -= amount

        if right:
            self.line_break()
            self.text(right)

    def text(self, value: str, width: int | None = None) -> None:
        """Add literal text; with trimming enabled its trailing whitespace becomes erasable."""
        if width is None:
            width = len(value)
        match = self._trailing_whitespace.search(value) if self.config.trim_trailing_whitespaces else None
        if match is None:
            self.tokens.append(String(value, width=width))
            return

        trailing = match.group(1)
        if len(trailing) != len(value):
            self.tokens.append(String(value[: -len(trailing)], width=width - len(trailing)))
        self.tokens.append(Whitespace(trailing))

    def breakable(self, value: str = " ", line_continuation: str = "", width: int | None = None) -> None:
        self.tokens.append(
            Break(value, width=width, line_continuation=line_continuation, offset=self.current_indent)
        )

    def line_break(self, line_continuation: str = "") -> None:
        self.tokens.append(LineBreak(line_continuation=line_continuation, offset=self.current_indent))

    def separate(
        self,
        items: Iterable[object],
        separator: str,
        render: Callable[[object], None],
        *,
        break_pos: BreakPosition | str = BreakPosition.AFTER,
        break_type: BreakType = BreakType.CONSISTENT,
        indent: bool | int = False,
        breakable: str = " ",
        line_continuation: str = "",
    ) -> None:
        """Render `items` in a group, separated by `separator` and a breakable.

        `indent` is the group offset: False means 0, True the builder default.
        """
        values = list(items)
        if not values:
            return
        position = BreakPosition(break_pos)
        if indent is True:
            offset = self.indent
        elif indent is False:
            offset = 0
        else:
            offset = indent

        with self.group(break_type, indent=offset):
            render(values[0])
            for value in values[1:]:
                if position == BreakPosition.AFTER:
                    self.text(separator)
                    self.breakable(breakable, line_continuation=line_continuation)
                else:
                    self.breakable(breakable, line_continuation=line_continuation)
                    self.text(separator)
                render(value)

    def lines(self, items: Iterable[object], separator: str, render: Callable[[object], None]) -> None:
        """Like `separate`, with every separator followed by a forced line break."""
        values = list(items)
        if not values:
            return
        with self.group(BreakType.CONSISTENT, indent=0):
            render(values[0])
            for value in values[1:]:
                self.text(separator)
                self.line_break()
                render(value)

    def concat(self, items: Iterable[object], separator: str, render: Callable[[object], None]) -> None:
        """Render `items` joined by `separator`, never breaking between them."""
        for index, value in enumerate(items):
            if index:
                self.text(separator)
            render(value)

    @contextmanager
    def surround(
        self,
        lft: str,
        rgt: str,
        *,
        indent: int = 0,
        lft_breakable: str = "",
        lft_can_break: bool = True,
        lft_force_break: bool = False,
        rgt_breakable: str = "",
        rgt_can_break: bool = True,
        rgt_force_break: bool = False,
    ) -> Iterator[None]:
        """Wrap the block between `lft` and `rgt` in an inconsistent group.

        A breakable follows `lft` and precedes `rgt`; each side can be forced
        into a line break or dropped altogether.
        """
        with self.group(BreakType.INCONSISTENT, indent=indent):
            self.text(lft)
            self._surround_break(lft_breakable, can_break=lft_can_break, force_break=lft_force_break)
            yield
            self._surround_break(rgt_breakable, can_break=rgt_can_break, force_break=rgt_force_break)
            self.text(rgt)

    def _surround_break(self, value: str, *, can_break: bool, force_break: bool) -> None:
        if force_break:
            self.line_break()
        elif can_break:
            self.breakable(value)

    # The `_break_both` and `_break_none` variants ignore `padding`.

    def angles(self, *, padding: str = ""):
        return self.surround("<", ">", lft_breakable=padding, rgt_breakable=padding)

    def angles_break_both(self, *, padding: str = ""):
        return self.surround("<", ">", lft_force_break=True, rgt_force_break=True)

    def angles_break_none(self, *, padding: str = ""):
        return self.surround("<", ">", lft_can_break=False, rgt_can_break=False)

    def braces(self, *, padding: str = ""):
        return self.surround("{", "}", lft_breakable=padding, rgt_breakable=padding)

    def braces_break_both(self, *, padding: str = ""):
        return self.surround("{", "}", lft_force_break=True, rgt_force_break=True)

    def braces_break_none(self, *, padding: str = ""):
        return self.surround("{", "}", lft_can_break=False, rgt_can_break=False)

    def brackets(self, *, padding: str = ""):
        return self.surround("[", "]", lft_breakable=padding, rgt_breakable=padding)

    def brackets_break_both(self, *, padding: str = ""):
        return self.surround("[", "]", lft_force_break=True, rgt_force_break=True)

    def brackets_break_none(self, *, padding: str = ""):
        return self.surround("[", "]", lft_can_break=False, rgt_can_break=False)

    def parens(self, *, padding: str = ""):
        return self.surround("(", ")", lft_breakable=padding, rgt_breakable=padding)

    def parens_break_both(self, *, padding: str = ""):
        return self.surround("(", ")", lft_force_break=True, rgt_force_break=True)

    def parens_break_none(self, *, padding: str = ""):
        return self.surround("(", ")", lft_can_break=False, rgt_can_break=False)

    # Quotes never break.

    def backticks(self):
        return self.surround("`", "`", lft_can_break=False, rgt_can_break=False)

    def quote_double(self):
        return self.surround('"', '"', lft_can_break=False, rgt_can_break=False)

    def quote_single(self):
        return self.surround("'", "'", lft_can_break=False, rgt_can_break=False)

    # Helpers for emitting unbalanced open/close pairs.

    def group_open(self, *, inconsistent: bool = False, indent: int = 0) -> None:
        if inconsistent:
            self.tokens.append(begin_inconsistent(offset=indent))
        else:
            self.tokens.append(begin_consistent(offset=indent))

    def group_close(self) -> None:
        self.tokens.append(End())

    def indent_open(self, *, indent: int | None = None) -> None:
        self.current_indent += self.indent if indent is None else indent
        self.group_open()

    def indent_close(self, *, indent: int | None = None) -> None:
        self.current_indent -= self.indent if indent is None else indent
        self.group_close()

    def nest_open(self, *, indent: int | None = None) -> None:
        self.current_indent += self.indent if indent is None else indent

    def nest_close(self, *, indent: int | None = None) -> None:
        self.current_indent -= self.indent if indent is None else indent
