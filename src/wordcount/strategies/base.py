"""
Base interface for the counting strategies under benchmark.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable

from wordcount.hash_config import LEVEL_CONFIGS, LoadFactorConfig
from wordcount.sizing import deep_size


class WordCountStrategy(ABC):
    """
    One counting backend behind the uniform increment/get/clear contract.

    Strategies are stateless; all mutable state lives in the handle returned
    by ``create``, which is owned by a single trial.
    """

    #: Identifier used in result tables.
    name: str = ""
    #: Literal key read after each counting pass.
    probe_key: str = ""

    @abstractmethod
    def create(self, expected_size: int, config: LoadFactorConfig) -> Any:
        """Allocate an empty map sized for ``expected_size`` entries at ``config``."""
        pass

    @abstractmethod
    def increment(self, handle: Any, key: str) -> None:
        """Add one to the count for ``key``, inserting it if absent."""
        pass

    @abstractmethod
    def get(self, handle: Any, key: str) -> int:
        """Return the count for ``key``, or 0 if absent. Must not mutate."""
        pass

    @abstractmethod
    def clear(self, handle: Any) -> None:
        """Remove all entries, keeping allocated storage where possible."""
        pass

    def retained_bytes(self, handle: Any) -> int:
        """Deep heap footprint of the map, including its keys but not the shared level configs."""
        return deep_size(handle, exclude=LEVEL_CONFIGS)

    def count_words(self, handle: Any, tokens: Iterable[str]) -> int:
        """
        The timed operation: count every token once, in order, then read the
        probe key so the pass has an observable result.
        """
        increment = self.increment
        for token in tokens:
            increment(handle, token)
        return self.get(handle, self.probe_key)

    def get_name(self) -> str:
        return self.name

    def get_metadata(self) -> Dict[str, Any]:
        """Describe the backend for result files."""
        return {
            "name": self.name,
            "probe_key": self.probe_key,
            "implementation": type(self).__name__,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
