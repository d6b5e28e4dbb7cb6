"""
Compact word-count map: a probed table of entry indices over dense entry arrays.

The hash table holds only ``int64`` entry numbers and may have any size, so it
can grow by any factor and sit exactly at the target load. Keys and counts are
appended to dense arrays sized to the table's maximum entry count.
"""
from __future__ import annotations

import logging

import numpy as np

from wordcount.hash_config import LoadFactorConfig, initial_capacity
from wordcount.maps.base import WordCountMap, max_size_for

logger = logging.getLogger(__name__)

_FREE = -1


def dense_capacity(expected_size: int, config: LoadFactorConfig) -> int:
    capacity = initial_capacity(expected_size, config)
    while max_size_for(capacity, config.max_load) < expected_size:
        capacity += 1
    return capacity


class DenseWordCountMap(WordCountMap):
    """Linear-probing index (modulo capacity) over insertion-ordered entries."""

    __slots__ = ("_config", "_table", "_keys", "_values", "_size", "_max_size")

    def __init__(self, config: LoadFactorConfig, capacity: int):
        self._config = config
        self._size = 0
        self._keys = []
        self._values = np.zeros(0, dtype=np.int64)
        self._allocate(capacity)

    @classmethod
    def with_config_and_expected_size(cls, config: LoadFactorConfig, expected_size: int) -> "DenseWordCountMap":
        return cls(config, dense_capacity(expected_size, config))

    def _allocate(self, capacity: int) -> None:
        self._table = np.full(capacity, _FREE, dtype=np.int64)
        self._max_size = max_size_for(capacity, self._config.max_load)
        extra = self._max_size - len(self._keys)
        if extra > 0:
            self._keys.extend([None] * extra)
            self._values = np.concatenate((self._values, np.zeros(extra, dtype=np.int64)))

    def _find(self, key: str):
        """Return ``(slot, entry)``; ``entry`` is ``_FREE`` when the key is absent."""
        table = self._table
        keys = self._keys
        capacity = len(table)
        i = hash(key) % capacity
        while True:
            entry = int(table[i])
            if entry == _FREE:
                return i, _FREE
            k = keys[entry]
            if k is key or k == key:
                return i, entry
            i += 1
            if i == capacity:
                i = 0

    def add_value(self, key: str, delta: int) -> int:
        slot, entry = self._find(key)
        if entry != _FREE:
            self._values[entry] += delta
            return int(self._values[entry])

        entry = self._size
        if entry >= self._max_size:
            self._grow(entry + 1)
            slot, _ = self._find(key)
        self._table[slot] = entry
        self._keys[entry] = key
        self._values[entry] = delta
        self._size += 1
        return delta

    def get_int(self, key: str) -> int:
        _, entry = self._find(key)
        if entry == _FREE:
            return 0
        return int(self._values[entry])

    def _grow(self, min_size: int) -> None:
        config = self._config
        capacity = max(int(len(self._table) * config.growth_factor), len(self._table) + 1)
        while max_size_for(capacity, config.max_load) < min_size:
            capacity += 1
        logger.debug(f"Dense map rehash {len(self._table)} -> {capacity} slots at {self._size} entries")

        self._allocate(capacity)
        table = self._table
        for entry in range(self._size):
            slot, _ = self._find(self._keys[entry])
            table[slot] = entry

    def clear(self) -> None:
        self._table.fill(_FREE)
        self._keys[:self._size] = [None] * self._size
        self._size = 0

    def capacity(self) -> int:
        return len(self._table)

    def __len__(self) -> int:
        return self._size
