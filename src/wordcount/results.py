"""
Aggregated retained-memory results.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from rich.table import Table


class ResultTable:
    """
    ``(strategy name, load level) -> retained bytes``.

    Each cell is written once. Iteration and output are ordered by strategy
    name, then ascending load level.
    """

    def __init__(self):
        self._cells: Dict[Tuple[str, int], int] = {}

    def record(self, strategy: str, load_level: int, retained_bytes: int) -> None:
        key = (strategy, load_level)
        if key in self._cells:
            raise ValueError(f"Result for {strategy} at level {load_level} already recorded")
        self._cells[key] = retained_bytes

    def get(self, strategy: str, load_level: int) -> int:
        return self._cells[(strategy, load_level)]

    def strategies(self) -> List[str]:
        return sorted({name for name, _ in self._cells})

    def levels(self) -> List[int]:
        return sorted({level for _, level in self._cells})

    def rows(self) -> Iterator[Tuple[str, int, int]]:
        for (name, level) in sorted(self._cells):
            yield name, level, self._cells[(name, level)]

    def format_lines(self) -> List[str]:
        """One ``name<TAB>level<TAB>bytes`` line per cell."""
        return [f"{name}\t{level}\t{value}" for name, level, value in self.rows()]

    def render(self, title: str = "Retained bytes by load level") -> Table:
        """Pivot to a rich table: one row per strategy, one column per level."""
        levels = self.levels()
        table = Table(title=title)
        table.add_column("Strategy", style="cyan")
        for level in levels:
            table.add_column(str(level), justify="right")
        for name in self.strategies():
            table.add_row(
                name,
                *(f"{self._cells[(name, level)]:,}" if (name, level) in self._cells else "-" for level in levels)
            )
        return table

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: Tuple[str, int]) -> bool:
        return key in self._cells
