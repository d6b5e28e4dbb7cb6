"""
Counting strategies that keep counts unboxed in fixed-width arrays.

The slot-indexed strategies pre-size their value array with
``initial_capacity`` and extend it by the growth factor. The khash strategies
pre-size from ``initial_capacity`` too, but khash fixes its own load bound and
doubles on growth. The harness's open-addressing maps size and resize their
tables from every config field.
"""
from typing import Iterable

from wordcount.hash_config import LoadFactorConfig, initial_capacity
from wordcount.maps import (
    ArrayIndexedCounts,
    DenseWordCountMap,
    NumpyIndexedCounts,
    ObjectKhashCounts,
    SparseWordCountMap,
    StringKhashCounts,
    WordCountMap,
)
from .base import WordCountStrategy


class _WordCountMapStrategy(WordCountStrategy):
    """Adapter for any ``WordCountMap``."""

    def increment(self, handle: WordCountMap, key: str) -> None:
        handle.add_value(key, 1)

    def get(self, handle: WordCountMap, key: str) -> int:
        return handle.get_int(key)

    def clear(self, handle: WordCountMap) -> None:
        handle.clear()

    def count_words(self, handle: WordCountMap, tokens: Iterable[str]) -> int:
        add_value = handle.add_value
        for word in tokens:
            add_value(word, 1)
        return handle.get_int(self.probe_key)

    def get_metadata(self):
        metadata = super().get_metadata()
        metadata["values_unboxed"] = True
        return metadata


class StringKhashStrategy(_WordCountMapStrategy):
    """khash keyed on the token's UTF-8 bytes."""

    name = "stringKhash"
    probe_key = "string"

    def create(self, expected_size: int, config: LoadFactorConfig) -> StringKhashCounts:
        return StringKhashCounts(initial_capacity(expected_size, config))


class ObjectKhashStrategy(_WordCountMapStrategy):
    """khash keyed on the token object, with Python hashing and equality."""

    name = "objectKhash"
    probe_key = "object"

    def create(self, expected_size: int, config: LoadFactorConfig) -> ObjectKhashCounts:
        return ObjectKhashCounts(initial_capacity(expected_size, config))


class NumpyValuesStrategy(_WordCountMapStrategy):
    name = "numpyValues"
    probe_key = "numpy"

    def create(self, expected_size: int, config: LoadFactorConfig) -> NumpyIndexedCounts:
        return NumpyIndexedCounts(initial_capacity(expected_size, config), config.growth_factor)


class ArrayValuesStrategy(_WordCountMapStrategy):
    name = "arrayValues"
    probe_key = "array"

    def create(self, expected_size: int, config: LoadFactorConfig) -> ArrayIndexedCounts:
        return ArrayIndexedCounts(initial_capacity(expected_size, config), config.growth_factor)


class OpenHashStrategy(_WordCountMapStrategy):
    """General-purpose open addressing: always the power-of-two layout."""

    name = "openHash"
    probe_key = "hash"

    def create(self, expected_size: int, config: LoadFactorConfig) -> SparseWordCountMap:
        return SparseWordCountMap.with_config_and_expected_size(config, expected_size)


class CompiledStrategy(_WordCountMapStrategy):
    """
    Layout picked once per trial: the mask-indexed sparse table when the
    config doubles on growth, the compact dense table otherwise.
    """

    name = "compiled"
    probe_key = "compiled"

    def create(self, expected_size: int, config: LoadFactorConfig) -> WordCountMap:
        if config.growth_factor == 2.0:
            return SparseWordCountMap.with_config_and_expected_size(config, expected_size)
        return DenseWordCountMap.with_config_and_expected_size(config, expected_size)
