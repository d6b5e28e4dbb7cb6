"""
Open-addressing word-count map over a power-of-two table.

Keys and counts live directly in the probed table, so every slot costs one
key reference plus one unboxed ``int64``. Indexing is a bit mask, which is
only exact when the table doubles on growth; other growth factors are rounded
up to the next power of two.
"""
from __future__ import annotations

import logging

import numpy as np

from wordcount.hash_config import LoadFactorConfig
from wordcount.maps.base import WordCountMap, max_size_for

logger = logging.getLogger(__name__)


def _pow2_at_least(n: int) -> int:
    return 1 << max(0, (n - 1).bit_length())


def sparse_capacity(expected_size: int, config: LoadFactorConfig) -> int:
    """
    Pick the power of two closest to ``expected_size / target_load`` that still
    keeps the load at or below ``max_load``.
    """
    target = expected_size / config.target_load
    lower = 1 << max(0, int(target).bit_length() - 1)
    upper = lower << 1
    fits_lower = max_size_for(lower, config.max_load) >= expected_size
    capacity = lower if fits_lower and target - lower <= upper - target else upper
    while max_size_for(capacity, config.max_load) < expected_size:
        capacity <<= 1
    return capacity


class SparseWordCountMap(WordCountMap):
    """Linear-probing map with keys and counts stored in the table itself."""

    __slots__ = ("_config", "_keys", "_values", "_mask", "_size", "_max_size")

    def __init__(self, config: LoadFactorConfig, capacity: int):
        if capacity & (capacity - 1):
            raise ValueError(f"capacity must be a power of two, got {capacity}")
        self._config = config
        self._size = 0
        self._allocate(capacity)

    @classmethod
    def with_config_and_expected_size(cls, config: LoadFactorConfig, expected_size: int) -> "SparseWordCountMap":
        return cls(config, sparse_capacity(expected_size, config))

    def _allocate(self, capacity: int) -> None:
        self._keys = [None] * capacity
        self._values = np.zeros(capacity, dtype=np.int64)
        self._mask = capacity - 1
        self._max_size = max_size_for(capacity, self._config.max_load)

    def _slot(self, key: str) -> int:
        keys = self._keys
        mask = self._mask
        i = hash(key) & mask
        while True:
            k = keys[i]
            if k is None or k is key or k == key:
                return i
            i = (i + 1) & mask

    def add_value(self, key: str, delta: int) -> int:
        i = self._slot(key)
        if self._keys[i] is None:
            self._keys[i] = key
            self._values[i] = delta
            self._size += 1
            if self._size > self._max_size:
                self._grow()
            return delta
        self._values[i] += delta
        return int(self._values[i])

    def get_int(self, key: str) -> int:
        i = self._slot(key)
        if self._keys[i] is None:
            return 0
        return int(self._values[i])

    def _grow(self) -> None:
        old_keys, old_values = self._keys, self._values
        capacity = _pow2_at_least(int(len(old_keys) * self._config.growth_factor))
        while max_size_for(capacity, self._config.max_load) < self._size:
            capacity <<= 1
        logger.debug(f"Sparse map rehash {len(old_keys)} -> {capacity} slots at {self._size} entries")

        self._allocate(capacity)
        keys, values = self._keys, self._values
        for k, v in zip(old_keys, old_values.tolist()):
            if k is not None:
                i = self._slot(k)
                keys[i] = k
                values[i] = v

    def clear(self) -> None:
        # Stale counts are overwritten on insert, so only the keys need resetting.
        self._keys[:] = [None] * len(self._keys)
        self._size = 0

    def capacity(self) -> int:
        return len(self._keys)

    def __len__(self) -> int:
        return self._size
