"""Indentation generators."""

import inspect
from collections.abc import Callable

from oppenpy.errors import InvalidConfigurationError

type IndentGenerator = Callable[[int], str]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def make_indent_generator(space: str | IndentGenerator) -> IndentGenerator:
    """Build the function producing the indentation of `n` columns.

    A string is repeated `n` times. A callable must take exactly one positional
    argument (the number of columns) and return the indentation string.
    """
    if isinstance(space, str):
        unit = space

        def repeat(columns: int) -> str:
            return unit * columns

        return repeat

    if not callable(space):
        raise InvalidConfigurationError(f"Indentation must be a string or a callable, got {type(space).__name__}")

    try:
        signature = inspect.signature(space)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"Cannot inspect indentation generator {space!r}") from exc

    parameters = list(signature.parameters.values())
    if len(parameters) != 1 or parameters[0].kind not in _POSITIONAL:
        raise InvalidConfigurationError(
            f"Indentation generator must take exactly one positional argument, got {signature}"
        )
    return space
