"""
Counts stored unboxed in a flat array, addressed through a ``dict`` of slots.

The built-in ``dict`` does the hashing; each distinct key is assigned the next
free slot of a value array that is pre-sized from the load-factor config and
extended by its growth factor. Clearing drops the slot assignments only, the
value array keeps its length and stale counts are overwritten on insert.
"""
from __future__ import annotations

from abc import abstractmethod
from array import array

import numpy as np

from wordcount.maps.base import WordCountMap


class IndexedCounts(WordCountMap):
    """Slot dictionary over a backend-specific value array."""

    __slots__ = ("slots", "values", "growth_factor")

    def __init__(self, capacity: int, growth_factor: float = 2.0):
        self.slots: dict = {}
        self.values = self._allocate(capacity)
        self.growth_factor = growth_factor

    @abstractmethod
    def _allocate(self, capacity: int):
        """Return a zeroed value array of ``capacity`` int64 cells."""
        pass

    @abstractmethod
    def _extend(self, extra: int) -> None:
        """Append ``extra`` zeroed cells to the value array."""
        pass

    def add_value(self, key: str, delta: int) -> int:
        slot = self.slots.get(key)
        if slot is None:
            slot = len(self.slots)
            if slot >= len(self.values):
                capacity = len(self.values)
                self._extend(max(int(capacity * self.growth_factor), capacity + 1) - capacity)
            self.slots[key] = slot
            self.values[slot] = delta
            return delta
        self.values[slot] += delta
        return int(self.values[slot])

    def get_int(self, key: str) -> int:
        slot = self.slots.get(key)
        if slot is None:
            return 0
        return int(self.values[slot])

    def clear(self) -> None:
        self.slots.clear()

    def capacity(self) -> int:
        return len(self.values)

    def __len__(self) -> int:
        return len(self.slots)


class NumpyIndexedCounts(IndexedCounts):
    __slots__ = ()

    def _allocate(self, capacity: int):
        return np.zeros(capacity, dtype=np.int64)

    def _extend(self, extra: int) -> None:
        self.values = np.concatenate((self.values, np.zeros(extra, dtype=np.int64)))


class ArrayIndexedCounts(IndexedCounts):
    __slots__ = ()

    def _allocate(self, capacity: int):
        return array("q", bytes(8 * capacity))

    def _extend(self, extra: int) -> None:
        self.values.frombytes(bytes(8 * extra))
