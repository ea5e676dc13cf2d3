"""Oppen's pretty-printing algorithm with a Wadler-style builder."""

from oppenpy.errors import (
    CapacityExceededError,
    InvalidConfigurationError,
    OppenError,
    StructuralError,
)
from oppenpy.log import configure_logging, get_logger
from oppenpy.printer import (
    ConfigProfile,
    ErasableSink,
    IndentAnchor,
    OutputSink,
    Printer,
    PrinterConfig,
    StringSink,
    pretty_print,
)
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
from oppenpy.wadler import BreakPosition, Wadler, tokens_to_wadler

__all__ = [
    "EOF",
    "Begin",
    "Break",
    "BreakPosition",
    "BreakType",
    "CapacityExceededError",
    "ConfigProfile",
    "End",
    "ErasableSink",
    "IndentAnchor",
    "InvalidConfigurationError",
    "LineBreak",
    "OppenError",
    "OutputSink",
    "Printer",
    "PrinterConfig",
    "String",
    "StringSink",
    "StructuralError",
    "Token",
    "Wadler",
    "Whitespace",
    "begin_consistent",
    "begin_inconsistent",
    "configure_logging",
    "get_logger",
    "pretty_print",
    "tokens_to_wadler",
]
