"""
Counting strategies built on the built-in ``dict`` family.

CPython dictionaries take no capacity or load-factor hints and release their
table on ``clear()``, so these strategies ignore the config; they are the
baseline the tunable maps are compared against.
"""
from array import array
from typing import Dict, Iterable

from wordcount.hash_config import LoadFactorConfig
from .base import WordCountStrategy


class HashMapStrategy(WordCountStrategy):
    """Plain ``dict`` of boxed ints, updated by merge (read, add, store)."""

    name = "hashMap"
    probe_key = "map"

    def create(self, expected_size: int, config: LoadFactorConfig) -> Dict[str, int]:
        return {}

    def increment(self, handle: Dict[str, int], key: str) -> None:
        handle[key] = handle.get(key, 0) + 1

    def get(self, handle: Dict[str, int], key: str) -> int:
        return handle.get(key, 0)

    def clear(self, handle: Dict[str, int]) -> None:
        handle.clear()

    def count_words(self, handle: Dict[str, int], tokens: Iterable[str]) -> int:
        freq_get = handle.get
        for word in tokens:
            handle[word] = freq_get(word, 0) + 1
        return handle.get(self.probe_key, 0)


class BoxedCellStrategy(WordCountStrategy):
    """
    ``dict`` of one-slot ``array('q')`` cells.

    Updates mutate the cell in place so no int object is rebound, at the price
    of a separately allocated box per key and an extra indirection per read.
    """

    name = "boxedCell"
    probe_key = "long"

    def create(self, expected_size: int, config: LoadFactorConfig) -> Dict[str, array]:
        return {}

    def increment(self, handle: Dict[str, array], key: str) -> None:
        cell = handle.get(key)
        if cell is None:
            handle[key] = array("q", (1,))
        else:
            cell[0] += 1

    def get(self, handle: Dict[str, array], key: str) -> int:
        cell = handle.get(key)
        return 0 if cell is None else cell[0]

    def clear(self, handle: Dict[str, array]) -> None:
        handle.clear()


class MutableInt:
    __slots__ = ("value",)

    def __init__(self):
        self.value = 0

    def increment(self) -> None:
        self.value += 1

    def get(self) -> int:
        return self.value


class MutableIntStrategy(WordCountStrategy):
    """``dict`` of lightweight ``MutableInt`` holders."""

    name = "mutableInt"
    probe_key = "mutable"

    def create(self, expected_size: int, config: LoadFactorConfig) -> Dict[str, MutableInt]:
        return {}

    def increment(self, handle: Dict[str, MutableInt], key: str) -> None:
        holder = handle.get(key)
        if holder is None:
            holder = handle[key] = MutableInt()
        holder.increment()

    def get(self, handle: Dict[str, MutableInt], key: str) -> int:
        holder = handle.get(key)
        return 0 if holder is None else holder.get()

    def clear(self, handle: Dict[str, MutableInt]) -> None:
        handle.clear()

    def count_words(self, handle: Dict[str, MutableInt], tokens: Iterable[str]) -> int:
        freq_get = handle.get
        for word in tokens:
            holder = freq_get(word)
            if holder is None:
                holder = handle[word] = MutableInt()
            holder.value += 1
        return self.get(handle, self.probe_key)
