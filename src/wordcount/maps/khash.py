"""
Counts held in pandas' khash tables.

pandas ships Cython wrappers over klib's khash: open addressing with
power-of-two bucket arrays, a fixed 0.77 upper load bound and doubling on
growth. Values are stored as native ``Py_ssize_t`` next to the keys. The
string table stores the key's UTF-8 buffer pointer and hashes the bytes; the
object table stores the ``PyObject*`` and uses Python hashing and equality.

Neither table owns a reference to its keys, so the map keeps them alive in
an insertion-ordered list. The native bucket arrays are invisible to the
garbage collector and are reported through ``__sizeof__``.
"""
from __future__ import annotations

from pandas._libs import hashtable

from wordcount.maps.base import WordCountMap


class KhashCounts(WordCountMap):
    """``str -> int`` counts over a pandas khash table."""

    __slots__ = ("_table", "_keys")

    #: pandas hashtable class backing the map
    table_type = None

    def __init__(self, size_hint: int = 1):
        self._table = self.table_type(size_hint)
        self._keys: list = []

    def add_value(self, key: str, delta: int) -> int:
        table = self._table
        try:
            value = table.get_item(key) + delta
        except KeyError:
            # the object table treats unhashable keys as absent
            hash(key)
            self._keys.append(key)
            value = delta
        table.set_item(key, value)
        return value

    def get_int(self, key: str) -> int:
        try:
            return self._table.get_item(key)
        except KeyError:
            return 0

    def clear(self) -> None:
        # khash has no clear; reallocate at the same bucket count
        upper_bound = self._table.get_state()["upper_bound"]
        self._table = self.table_type(max(upper_bound, 1))
        self._keys.clear()

    def capacity(self) -> int:
        return self._table.get_state()["n_buckets"]

    def table_bytes(self) -> int:
        """Bytes held by the native bucket, flag and value arrays."""
        return self._table.sizeof()

    def __sizeof__(self) -> int:
        return object.__sizeof__(self) + self.table_bytes()

    def __len__(self) -> int:
        return len(self._keys)


class StringKhashCounts(KhashCounts):
    __slots__ = ()
    table_type = hashtable.StringHashTable


class ObjectKhashCounts(KhashCounts):
    __slots__ = ()
    table_type = hashtable.PyObjectHashTable
