"""
Memory sweep driver and cross-strategy verification.
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from wordcount.corpus import Corpus
from wordcount.hash_config import LOAD_LEVELS
from wordcount.results import ResultTable
from wordcount.strategies import STRATEGIES, WordCountStrategy
from wordcount.trial import new_trial

logger = logging.getLogger(__name__)


def measure_retention(strategy: WordCountStrategy, corpus: Corpus, load_level: int) -> int:
    """Populate a fresh map with one counting pass and return its retained bytes."""
    trial = new_trial(strategy, corpus, load_level)
    trial.run_invocation()
    return trial.retained_bytes()


def run_memory_sweep(corpus: Corpus,
                     load_levels: Iterable[int] = LOAD_LEVELS,
                     strategies: Sequence[WordCountStrategy] = STRATEGIES) -> ResultTable:
    """
    Measure retained memory for every ``(strategy, load level)`` pair.

    Levels form the outer loop and strategies the inner loop in declaration
    order; each pair gets its own freshly created map.
    """
    results = ResultTable()
    for load_level in load_levels:
        logger.info(f"Measuring retained memory at load level {load_level}")
        for strategy in strategies:
            retained = measure_retention(strategy, corpus, load_level)
            logger.debug(f"  {strategy.name}: {retained} bytes")
            results.record(strategy.name, load_level, retained)
    return results


@dataclass(frozen=True)
class CountMismatch:
    strategy: str
    token: str
    expected: int
    actual: int


def verify_equivalence(corpus: Corpus,
                       strategies: Sequence[WordCountStrategy] = STRATEGIES,
                       load_level: int = 5) -> List[CountMismatch]:
    """
    Run one counting pass per strategy and compare every distinct token's
    count with a reference ``Counter``. Returns the mismatches found.
    """
    expected = Counter(corpus.tokens)
    mismatches: List[CountMismatch] = []

    for strategy in strategies:
        trial = new_trial(strategy, corpus, load_level)
        trial.reset_for_invocation()
        trial.run_invocation()
        for token, count in expected.items():
            actual = trial.get(token)
            if actual != count:
                mismatches.append(CountMismatch(strategy.name, token, count, actual))
        probe_expected = expected.get(strategy.probe_key, 0)
        probe_actual = trial.get(strategy.probe_key)
        if probe_actual != probe_expected:
            mismatches.append(CountMismatch(strategy.name, strategy.probe_key, probe_expected, probe_actual))

    if mismatches:
        logger.warning(f"Found {len(mismatches)} count mismatches")
    else:
        logger.info(f"All {len(strategies)} strategies agree on {len(expected)} distinct tokens")
    return mismatches
