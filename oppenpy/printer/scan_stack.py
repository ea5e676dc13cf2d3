"""Scan stack: ring indices of tokens whose size is not known yet."""

from collections import deque

from oppenpy.errors import CapacityExceededError, StructuralError
from oppenpy.log import get_logger

logger = get_logger(__name__)

UPSIZE_FACTOR = 3


class ScanStack:
    """Bounded double-ended stack of token ring indices.

    Entries are pushed and popped at the top; the flush sweep also gives up on
    the oldest entry from the bottom.
    """

    def __init__(self, capacity: int, *, growable: bool = False) -> None:
        if capacity <= 0:
            raise ValueError("ScanStack capacity must be positive")
        self._items: deque[int] = deque()
        self._capacity = capacity
        self._growable = growable

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def top(self) -> int:
        if not self._items:
            raise StructuralError("Accessing empty scan stack")
        return self._items[-1]

    @property
    def bottom(self) -> int:
        if not self._items:
            raise StructuralError("Accessing empty scan stack")
        return self._items[0]

    def push(self, index: int) -> None:
        if len(self._items) == self._capacity:
            if not self._growable:
                raise CapacityExceededError(
                    f"Scan stack full (capacity {self._capacity})",
                    capacity=self._capacity,
                )
            self._capacity *= UPSIZE_FACTOR
            logger.debug("Scan stack grown to %d entries", self._capacity)
        self._items.append(index)

    def pop(self) -> int:
        if not self._items:
            raise StructuralError("Popping empty scan stack")
        return self._items.pop()

    def pop_bottom(self) -> int:
        if not self._items:
            raise StructuralError("Popping empty scan stack")
        return self._items.popleft()

    def rebase(self, rotation: int, modulus: int) -> None:
        """Follow a rotation of the token ring (see `TokenRing.grow`)."""
        self._items = deque((index - rotation) % modulus for index in self._items)

    def as_list(self) -> list[int]:
        """Indices from bottom to top."""
        return list(self._items)
