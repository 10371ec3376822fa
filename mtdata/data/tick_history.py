"""
Growable, append-only tick storage.

Storage is preallocated in fixed-size blocks. Appending past the current
capacity grows it by exactly one block; capacity only shrinks on reset().
"""

from typing import Optional

from ..errors import HistoryAllocationError
from .models import Tick

DEFAULT_BLOCK_SIZE = 100


class TickHistory:
    """Chronological tick history for one instrument."""

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE):
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = block_size
        self.index = 0              # next write position
        self.reallocations = 0      # growth events since creation
        self._slots: list[Optional[Tick]] = [None] * block_size

    def __len__(self) -> int:
        return self.index

    def __iter__(self):
        for position in range(self.index):
            yield self._slots[position]

    def __getitem__(self, position: int) -> Tick:
        if position < 0:
            position += self.index
        if not 0 <= position < self.index:
            raise IndexError("tick history index out of range")
        return self._slots[position]  # type: ignore[return-value]

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def append(self, tick: Tick) -> None:
        """
        Store a tick at the append index.

        Raises:
            HistoryAllocationError: if the storage could not be grown; the
                history is left as it was
        """
        if self.index >= self.capacity:
            self._grow()
        self._slots[self.index] = tick
        self.index += 1

    def reset(self) -> None:
        """Drop all ticks and shrink storage back to one block of reserve."""
        self._slots = [None] * self.block_size
        self.index = 0

    def snapshot(self) -> tuple[Tick, ...]:
        """Immutable copy of the stored ticks, oldest first."""
        return tuple(self._slots[:self.index])  # type: ignore[arg-type]

    def _grow(self) -> None:
        new_capacity = self.capacity + self.block_size
        try:
            self._slots.extend([None] * self.block_size)
        except MemoryError as e:
            raise HistoryAllocationError(
                f"Cannot grow tick history to {new_capacity} slots",
                requested_capacity=new_capacity,
                current_capacity=self.capacity,
            ) from e
        self.reallocations += 1
