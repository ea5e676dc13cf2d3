"""Printer profiles and configuration flags."""

from dataclasses import dataclass
from enum import StrEnum


class IndentAnchor(StrEnum):
    """Where the indentation of a new line is measured from."""

    # Column where the enclosing group started, minus its offset (Oppen's rule).
    END_OF_PREVIOUS_LINE = "end_of_previous_line"
    # Sum of the offsets of the enclosing groups, whatever precedes them on the line.
    CURRENT_OFFSET = "current_offset"


class ConfigProfile(StrEnum):
    """Named behavior profiles."""

    OPPEN = "oppen"
    WADLER = "wadler"


@dataclass(frozen=True, slots=True)
class PrinterConfig:
    """Behavioral flags of the printer.

    - `eager_print`: try to flush as soon as a group closes, packing as much as
      possible on the current line.
    - `indent_anchor`: see `IndentAnchor`.
    - `trim_trailing_whitespaces`: erase `Whitespace` tokens and indentation
      left at the end of a line when a break is taken.
    - `upsize_stack`: grow the token ring and scan stack instead of raising
      `CapacityExceededError`.
    """

    eager_print: bool = False
    indent_anchor: IndentAnchor = IndentAnchor.END_OF_PREVIOUS_LINE
    trim_trailing_whitespaces: bool = False
    upsize_stack: bool = False

    @staticmethod
    def oppen() -> "PrinterConfig":
        """Behave exactly as described in Oppen's paper."""
        return PrinterConfig()

    @staticmethod
    def wadler(
        *,
        eager_print: bool = True,
        trim_trailing_whitespaces: bool = True,
        upsize_stack: bool = True,
    ) -> "PrinterConfig":
        """Behave like Wadler-style printers (and Ruby's `prettyprint`).

        Groups are printed eagerly, indentation is anchored on the left margin,
        trailing whitespaces are removed and the buffers grow on demand.
        """
        return PrinterConfig(
            eager_print=eager_print,
            indent_anchor=IndentAnchor.CURRENT_OFFSET,
            trim_trailing_whitespaces=trim_trailing_whitespaces,
            upsize_stack=upsize_stack,
        )

    @staticmethod
    def for_profile(profile: ConfigProfile) -> "PrinterConfig":
        if profile == ConfigProfile.WADLER:
            return PrinterConfig.wadler()
        return PrinterConfig.oppen()
