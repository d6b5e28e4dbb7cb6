"""
Base interface for the harness's own word-count maps.
"""
from abc import ABC, abstractmethod


class WordCountMap(ABC):
    """A ``str -> int`` counting map with unboxed values."""

    __slots__ = ()

    @abstractmethod
    def add_value(self, key: str, delta: int) -> int:
        """Add ``delta`` to the count for ``key`` (inserting it) and return the new count."""
        pass

    @abstractmethod
    def get_int(self, key: str) -> int:
        """Return the count for ``key``, or 0 if absent."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries while keeping the allocated table."""
        pass

    @abstractmethod
    def capacity(self) -> int:
        """Return the number of hash slots currently allocated."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


def max_size_for(capacity: int, max_load: float) -> int:
    """Entries a table of ``capacity`` slots may hold; one slot always stays free."""
    return min(int(capacity * max_load), capacity - 1)
