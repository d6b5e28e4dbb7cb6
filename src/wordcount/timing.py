"""
Average-time measurement of the counting pass.

A deliberately small stand-in for a full benchmarking framework: per trial it
runs untimed warmup invocations, then timed ones, clearing the map before
each invocation outside the timed region.
"""
from __future__ import annotations

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from wordcount.corpus import Corpus
from wordcount.hash_config import LOAD_LEVELS
from wordcount.sizing import process_rss_bytes
from wordcount.strategies import STRATEGIES, WordCountStrategy
from wordcount.trial import Trial, new_trial

logger = logging.getLogger(__name__)


@dataclass
class TimingResult:
    """Timed invocations for one ``(strategy, load level)`` pair."""
    strategy: str
    load_level: int
    samples_ms: List[float]
    probe: int
    rss_bytes: Optional[int] = None
    metadata: Dict[str, object] = field(default_factory=dict)

    def get_stats(self) -> Dict[str, float]:
        samples = self.samples_ms
        if not samples:
            return {"count": 0, "mean": 0.0, "median": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}

        return {
            "count": len(samples),
            "mean": statistics.mean(samples),
            "median": statistics.median(samples),
            "std": statistics.stdev(samples) if len(samples) > 1 else 0.0,
            "min": min(samples),
            "max": max(samples),
        }

    @property
    def mean_ms(self) -> float:
        return self.get_stats()["mean"]

    @property
    def median_ms(self) -> float:
        return self.get_stats()["median"]

    @property
    def stdev_ms(self) -> float:
        return self.get_stats()["std"]

    @property
    def min_ms(self) -> float:
        return min(self.samples_ms, default=0.0)

    @property
    def max_ms(self) -> float:
        return max(self.samples_ms, default=0.0)


def time_trial(trial: Trial, warmup_iterations: int = 20, measurement_iterations: int = 20) -> TimingResult:
    """Warm up, then time ``measurement_iterations`` invocations of ``trial``."""
    probe = 0
    for _ in range(warmup_iterations):
        trial.reset_for_invocation()
        probe = trial.run_invocation()

    samples: List[float] = []
    for _ in range(measurement_iterations):
        trial.reset_for_invocation()
        start = time.perf_counter()
        probe = trial.run_invocation()
        samples.append((time.perf_counter() - start) * 1000.0)

    return TimingResult(
        strategy=trial.strategy.name,
        load_level=trial.load_level,
        samples_ms=samples,
        probe=probe,
        rss_bytes=process_rss_bytes(),
        metadata=trial.strategy.get_metadata(),
    )


def run_timing_sweep(corpus: Corpus,
                     load_levels: Iterable[int] = LOAD_LEVELS,
                     strategies: Sequence[WordCountStrategy] = STRATEGIES,
                     warmup_iterations: int = 20,
                     measurement_iterations: int = 20) -> List[TimingResult]:
    """Time every ``(strategy, load level)`` pair; results sorted by name then level."""
    results: List[TimingResult] = []
    for load_level in load_levels:
        for strategy in strategies:
            logger.info(f"Timing {strategy.name} at load level {load_level}...")
            trial = new_trial(strategy, corpus, load_level)
            result = time_trial(trial, warmup_iterations, measurement_iterations)
            logger.debug(f"  {strategy.name}: {result.mean_ms:.3f} ms/op")
            results.append(result)

    results.sort(key=lambda r: (r.strategy, r.load_level))
    return results


def save_timing_results(results: Sequence[TimingResult], output_dir: str) -> str:
    """Save timing results to a timestamped JSON file and return its path."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    filepath = directory / f"wordcount_timing_{timestamp}.json"

    serializable = [
        {**asdict(result), "stats": result.get_stats()}
        for result in results
    ]
    with open(filepath, 'w') as f:
        json.dump(serializable, f, indent=2)

    logger.info(f"Results saved to: {filepath}")
    return str(filepath)
