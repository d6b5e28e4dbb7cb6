"""
Word-count maps owned by the harness.

These are the "compiled" maps (sparse and dense layouts) and the slot-indexed
and khash-backed containers used by the unboxed-value strategies.
"""

from .base import WordCountMap
from .dense import DenseWordCountMap
from .indexed import ArrayIndexedCounts, IndexedCounts, NumpyIndexedCounts
from .khash import KhashCounts, ObjectKhashCounts, StringKhashCounts
from .sparse import SparseWordCountMap

__all__ = [
    'WordCountMap',
    'SparseWordCountMap',
    'DenseWordCountMap',
    'IndexedCounts',
    'NumpyIndexedCounts',
    'ArrayIndexedCounts',
    'KhashCounts',
    'StringKhashCounts',
    'ObjectKhashCounts',
]
