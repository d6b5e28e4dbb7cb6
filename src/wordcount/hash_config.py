"""
Load-factor configurations for the benchmark sweep.

Each integer load level maps to a hand-tuned resize policy. Levels 1-7 double
the table on growth with a target load rising from 0.1 to 0.7; levels 8 and 9
pack tighter and grow in smaller steps so the extra density is not lost to a
single oversized resize.
"""
from __future__ import annotations

from dataclasses import dataclass

LOAD_LEVELS = tuple(range(1, 10))


@dataclass(frozen=True)
class LoadFactorConfig:
    """Resize policy for one trial."""
    min_load: float
    target_load: float
    max_load: float
    growth_factor: float

    def __post_init__(self):
        if not 0.0 < self.min_load <= self.target_load <= self.max_load <= 1.0:
            raise ValueError(
                f"loads must satisfy 0 < min <= target <= max <= 1, got "
                f"({self.min_load}, {self.target_load}, {self.max_load})"
            )
        if self.growth_factor < 1.0:
            raise ValueError(f"growth factor must be >= 1, got {self.growth_factor}")


_CONFIGS = {
    1: LoadFactorConfig(0.066, 0.1, 0.134, 2.0),
    2: LoadFactorConfig(0.133, 0.2, 0.267, 2.0),
    3: LoadFactorConfig(0.2, 0.3, 0.4, 2.0),
    4: LoadFactorConfig(0.266, 0.4, 0.534, 2.0),
    5: LoadFactorConfig(0.33, 0.5, 0.67, 2.0),
    6: LoadFactorConfig(0.4, 0.6, 0.8, 2.0),
    7: LoadFactorConfig(0.466, 0.7, 0.934, 2.0),
    8: LoadFactorConfig(0.64, 0.8, 0.96, 1.5),
    9: LoadFactorConfig(0.79, 0.9, 0.99, 1.25),
}

# Module-level policies shared by every map built at a given level
LEVEL_CONFIGS = tuple(_CONFIGS.values())


def derive_config(load_level: int) -> LoadFactorConfig:
    """Return the resize policy for ``load_level`` (1..9)."""
    if isinstance(load_level, bool) or not isinstance(load_level, int) or load_level not in _CONFIGS:
        raise AssertionError(f"load level must be an integer in 1..9, got {load_level!r}")
    return _CONFIGS[load_level]


def initial_capacity(expected_size: int, config: LoadFactorConfig) -> int:
    """
    Number of slots needed to hold ``expected_size`` entries at the target load
    without resizing. The ``+ 1`` keeps the capacity non-zero for an empty map.
    """
    return int(expected_size / config.target_load) + 1
