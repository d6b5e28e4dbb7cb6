"""
The closed set of counting strategies, in declaration order.
"""
from typing import Dict, Iterable, Tuple

from .base import WordCountStrategy
from .boxed import (
    BoxedCellStrategy,
    HashMapStrategy,
    MutableInt,
    MutableIntStrategy,
)
from .unboxed import (
    ArrayValuesStrategy,
    CompiledStrategy,
    NumpyValuesStrategy,
    ObjectKhashStrategy,
    OpenHashStrategy,
    StringKhashStrategy,
)

STRATEGIES: Tuple[WordCountStrategy, ...] = (
    HashMapStrategy(),
    BoxedCellStrategy(),
    MutableIntStrategy(),
    StringKhashStrategy(),
    ObjectKhashStrategy(),
    NumpyValuesStrategy(),
    ArrayValuesStrategy(),
    OpenHashStrategy(),
    CompiledStrategy(),
)

_BY_NAME: Dict[str, WordCountStrategy] = {s.name: s for s in STRATEGIES}

STRATEGY_NAMES: Tuple[str, ...] = tuple(_BY_NAME)


def get_strategy(name: str) -> WordCountStrategy:
    """Look up a strategy by name; raises ``KeyError`` for unknown names."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown strategy '{name}'. Available: {', '.join(STRATEGY_NAMES)}") from None


def select_strategies(names: Iterable[str]) -> Tuple[WordCountStrategy, ...]:
    """Resolve ``names`` to strategies, keeping declaration order."""
    wanted = {get_strategy(n).name for n in names}
    return tuple(s for s in STRATEGIES if s.name in wanted)


__all__ = [
    'WordCountStrategy',
    'STRATEGIES',
    'STRATEGY_NAMES',
    'get_strategy',
    'select_strategies',
    'HashMapStrategy',
    'BoxedCellStrategy',
    'MutableInt',
    'MutableIntStrategy',
    'StringKhashStrategy',
    'ObjectKhashStrategy',
    'NumpyValuesStrategy',
    'ArrayValuesStrategy',
    'OpenHashStrategy',
    'CompiledStrategy',
]
