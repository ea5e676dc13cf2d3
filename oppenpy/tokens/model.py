"""Printer tokens."""

import sys
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from oppenpy.errors import InvalidConfigurationError

LINE_BREAK_WIDTH: Final[int] = sys.maxsize
"""Width of a `LineBreak`: larger than any line, so it can never fit."""

DEFAULT_GROUP_OFFSET: Final[int] = 2


class BreakType(StrEnum):
    """How the breaks directly inside a group are decided."""

    CONSISTENT = "consistent"  # one break taken => every break taken
    INCONSISTENT = "inconsistent"  # each break decided on its own


@dataclass(frozen=True, slots=True)
class Begin:
    """Opens a group."""

    break_type: BreakType = BreakType.INCONSISTENT
    offset: int = DEFAULT_GROUP_OFFSET

    @property
    def width(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class End:
    """Closes the innermost open group."""

    @property
    def width(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class String:
    """Literal text.

    `width` defaults to `len(value)`; override it when the rendered width
    differs from the text length (markup, escape sequences, ...).
    """

    value: str
    width: int | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            object.__setattr__(self, "width", len(self.value))


@dataclass(frozen=True, slots=True)
class Whitespace(String):
    """Literal text that may be erased when it ends up trailing a line."""


@dataclass(frozen=True, slots=True)
class Break:
    """A potential line break.

    When not taken, `value` is printed. When taken, `line_continuation` is
    printed, then a new line indented by the enclosing group plus `offset`.
    """

    value: str = " "
    width: int | None = None
    line_continuation: str = ""
    offset: int = 0

    def __post_init__(self) -> None:
        if self.line_continuation is None:
            raise InvalidConfigurationError("line_continuation cannot be None; use '' for no continuation")
        if self.width is None:
            object.__setattr__(self, "width", len(self.value))


@dataclass(frozen=True, slots=True)
class LineBreak(Break):
    """A `Break` that is always taken."""

    value: str = ""
    width: int | None = LINE_BREAK_WIDTH


@dataclass(frozen=True, slots=True)
class EOF:
    """Flushes everything buffered so far."""

    @property
    def width(self) -> int:
        return 0


type Token = Begin | End | String | Break | EOF


def begin_consistent(offset: int = DEFAULT_GROUP_OFFSET) -> Begin:
    """Open a group whose breaks are all taken as soon as one of them is."""
    return Begin(break_type=BreakType.CONSISTENT, offset=offset)


def begin_inconsistent(offset: int = DEFAULT_GROUP_OFFSET) -> Begin:
    """Open a group whose breaks are taken independently of each other."""
    return Begin(break_type=BreakType.INCONSISTENT, offset=offset)
