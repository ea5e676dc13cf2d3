"""Token model."""

from oppenpy.tokens.model import (
    DEFAULT_GROUP_OFFSET,
    EOF,
    LINE_BREAK_WIDTH,
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

__all__ = [
    "DEFAULT_GROUP_OFFSET",
    "EOF",
    "LINE_BREAK_WIDTH",
    "Begin",
    "Break",
    "BreakType",
    "End",
    "LineBreak",
    "String",
    "Token",
    "Whitespace",
    "begin_consistent",
    "begin_inconsistent",
]
