import pytest
from rich.console import Console

from wordcount.results import ResultTable


def _table():
    table = ResultTable()
    table.record("mutableInt", 2, 300)
    table.record("hashMap", 9, 120)
    table.record("hashMap", 1, 200)
    table.record("mutableInt", 1, 310)
    return table


def test_lines_are_tab_separated_and_sorted():
    assert _table().format_lines() == [
        "hashMap\t1\t200",
        "hashMap\t9\t120",
        "mutableInt\t1\t310",
        "mutableInt\t2\t300",
    ]


def test_cells_are_write_once():
    table = _table()

    with pytest.raises(ValueError):
        table.record("hashMap", 1, 999)

    assert table.get("hashMap", 1) == 200


def test_accessors():
    table = _table()

    assert len(table) == 4
    assert ("hashMap", 9) in table
    assert ("hashMap", 2) not in table
    assert table.strategies() == ["hashMap", "mutableInt"]
    assert table.levels() == [1, 2, 9]


def test_render_pivots_strategies_by_level():
    console = Console(record=True, width=120)

    console.print(_table().render())
    text = console.export_text()

    assert "hashMap" in text
    assert "310" in text
    assert "-" in text
