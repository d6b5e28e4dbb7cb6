"""
Per-trial state and the reset protocol.

A trial binds one strategy, one load level and one freshly created map. The
map is allocated once in ``new_trial``; ``reset_for_invocation`` clears it
before each timed invocation so allocation is paid up front while growth
during counting is still measured.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from wordcount.corpus import Corpus
from wordcount.hash_config import LoadFactorConfig, derive_config
from wordcount.strategies import WordCountStrategy

logger = logging.getLogger(__name__)


@dataclass
class Trial:
    strategy: WordCountStrategy
    corpus: Corpus
    load_level: int
    config: LoadFactorConfig
    handle: Any

    def reset_for_invocation(self) -> None:
        self.strategy.clear(self.handle)

    def run_invocation(self) -> int:
        """Run one counting pass and return the probe value."""
        return self.strategy.count_words(self.handle, self.corpus.tokens)

    def retained_bytes(self) -> int:
        """Footprint of the map beyond the distinct tokens it keys on."""
        return self.strategy.retained_bytes(self.handle) - self.corpus.baseline_retained_bytes

    def get(self, key: str) -> int:
        return self.strategy.get(self.handle, key)


def new_trial(strategy: WordCountStrategy, corpus: Corpus, load_level: int) -> Trial:
    """Derive the config for ``load_level`` and allocate the strategy's map once."""
    config = derive_config(load_level)
    handle = strategy.create(corpus.distinct_count, config)
    logger.debug(f"New trial {strategy.name} level={load_level} config={config}")
    return Trial(
        strategy=strategy,
        corpus=corpus,
        load_level=load_level,
        config=config,
        handle=handle,
    )
