"""Circular buffer of tokens waiting to be printed."""

from oppenpy.tokens import Token

type Size = int | float
"""Resolved width of a buffered token; negative while provisional, `inf` when forced."""


class TokenRing:
    """Two parallel circular arrays: pending tokens and their sizes.

    `left` is the oldest token not yet handed to the print stack (or the last
    one printed once the ring is drained), `right` the most recently buffered.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("TokenRing capacity must be positive")
        self._tokens: list[Token | None] = [None] * capacity
        self._sizes: list[Size] = [0] * capacity
        self._left = 0
        self._right = 0

    @property
    def capacity(self) -> int:
        return len(self._tokens)

    @property
    def left(self) -> int:
        return self._left

    @property
    def right(self) -> int:
        return self._right

    @property
    def is_drained(self) -> bool:
        return self._left == self._right

    def reset(self) -> None:
        self._left = 0
        self._right = 0

    def token(self, index: int) -> Token:
        token = self._tokens[index]
        if token is None:
            raise IndexError(f"No token buffered at index {index}")
        return token

    def size(self, index: int) -> Size:
        return self._sizes[index]

    def set_size(self, index: int, size: Size) -> None:
        self._sizes[index] = size

    def put(self, token: Token, size: Size) -> None:
        """Store `token` at the right cursor."""
        self._tokens[self._right] = token
        self._sizes[self._right] = size

    def advance_right(self) -> bool:
        """Move the right cursor; False when it ran into the left one."""
        self._right = (self._right + 1) % self.capacity
        return self._right != self._left

    def advance_left(self) -> None:
        self._left = (self._left + 1) % self.capacity

    def grow(self) -> tuple[int, int]:
        """Triple the capacity after a collision of the cursors.

        Both arrays are rotated so the oldest token lands at index 0, then
        padded with empty slots; `right` points at the first new slot.
        Returns `(rotation, old_capacity)` so indices held elsewhere can be
        rebased with `(index - rotation) % old_capacity`.
        """
        rotation = self._left
        old_capacity = self.capacity
        padding = 2 * old_capacity
        self._tokens = self._tokens[rotation:] + self._tokens[:rotation] + [None] * padding
        self._sizes = self._sizes[rotation:] + self._sizes[:rotation] + [0] * padding
        self._left = 0
        self._right = old_capacity
        return rotation, old_capacity
