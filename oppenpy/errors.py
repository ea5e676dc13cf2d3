"""Printer errors."""


class OppenError(Exception):
    """Base class for every error raised by the printer."""


class StructuralError(OppenError, RuntimeError):
    """A stack was peeked or popped while empty.

    Only a malformed token stream (e.g. an unmatched `End`) or a driver bug can
    get here.
    """


class CapacityExceededError(OppenError, RuntimeError):
    """The token ring or the scan stack is full and growth is disabled."""

    def __init__(self, message: str, *, capacity: int) -> None:
        super().__init__(message)
        self.capacity = capacity


class InvalidConfigurationError(OppenError, ValueError):
    """Printer, token or builder configured with an unusable value."""
