"""Printer engine: configuration, buffers and emission."""

from oppenpy.printer.config import ConfigProfile, IndentAnchor, PrinterConfig
from oppenpy.printer.indent import IndentGenerator, make_indent_generator
from oppenpy.printer.pretty import pretty_print
from oppenpy.printer.print_stack import PrintMode, PrintStack, PrintStackEntry
from oppenpy.printer.printer import Printer
from oppenpy.printer.ring_buffer import Size, TokenRing
from oppenpy.printer.scan_stack import ScanStack
from oppenpy.printer.sink import ErasableSink, OutputSink, StringSink, TextStreamSink, as_erasable

__all__ = [
    "ConfigProfile",
    "ErasableSink",
    "IndentAnchor",
    "IndentGenerator",
    "OutputSink",
    "PrintMode",
    "PrintStack",
    "PrintStackEntry",
    "Printer",
    "PrinterConfig",
    "ScanStack",
    "Size",
    "StringSink",
    "TextStreamSink",
    "TokenRing",
    "as_erasable",
    "make_indent_generator",
    "pretty_print",
]
