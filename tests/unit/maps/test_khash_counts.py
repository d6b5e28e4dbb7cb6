import sys

import pytest

from wordcount.maps.khash import ObjectKhashCounts, StringKhashCounts
from wordcount.sizing import deep_size


@pytest.fixture(params=[StringKhashCounts, ObjectKhashCounts], ids=["string", "object"])
def counts_cls(request):
    return request.param


def test_add_and_get(counts_cls):
    counts = counts_cls(4)

    assert counts.add_value("x", 1) == 1
    counts.add_value("y", 1)
    assert counts.add_value("x", 1) == 2

    assert counts.get_int("x") == 2
    assert counts.get_int("y") == 1
    assert counts.get_int("z") == 0
    assert len(counts) == 2


def test_table_grows_past_its_size_hint(counts_cls):
    counts = counts_cls(2)
    initial = counts.capacity()

    for i in range(500):
        counts.add_value(f"w{i}", i)

    assert counts.capacity() > initial
    assert len(counts) == 500
    assert all(counts.get_int(f"w{i}") == i for i in range(500))


def test_size_hint_presizes_the_table(counts_cls):
    assert counts_cls(1000).capacity() >= 1000


def test_clear_forgets_keys_and_keeps_capacity(counts_cls):
    counts = counts_cls(4)
    for i in range(100):
        counts.add_value(f"w{i}", 1)
    capacity = counts.capacity()

    counts.clear()

    assert len(counts) == 0
    assert counts.get_int("w0") == 0
    assert counts.capacity() >= capacity
    assert counts.add_value("w0", 1) == 1


def test_keys_stay_referenced_by_the_map(counts_cls):
    counts = counts_cls(4)
    counts.add_value("".join(["tran", "sient"]), 1)

    assert counts.get_int("transient") == 1


def test_native_table_is_part_of_the_footprint(counts_cls):
    counts = counts_cls(1000)

    assert counts.table_bytes() > 0
    assert sys.getsizeof(counts) >= counts.table_bytes()
    assert deep_size(counts) > counts.table_bytes()


def test_unhashable_keys_raise(counts_cls):
    counts = counts_cls(4)

    with pytest.raises(TypeError):
        counts.add_value(["unhashable"], 1)
    assert len(counts) == 0
