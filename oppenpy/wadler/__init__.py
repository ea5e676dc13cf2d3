"""Wadler-style document builder on top of the printer."""

from oppenpy.wadler.builder import BreakPosition, Delimiter, Wadler
from oppenpy.wadler.commands import tokens_to_wadler

__all__ = [
    "BreakPosition",
    "Delimiter",
    "Wadler",
    "tokens_to_wadler",
]
