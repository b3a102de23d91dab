import pytest

from boardtrace.board import Point, Stone, StoneTypeDataStorage, remove_object


def test_stone_values():
    assert Stone(-1) is Stone.WHITE
    assert Stone(0) is Stone.NONE
    assert Stone(1) is Stone.BLACK


def test_point_defaults_and_values():
    assert Point() == Point(0, 0)
    assert Point(3, 4).y == 4


def test_storage_indexed_by_stone():
    storage = StoneTypeDataStorage()
    storage[Stone.WHITE] = 5
    storage[Stone.BLACK] = 7
    assert storage[Stone.WHITE] == 5
    assert storage[Stone.BLACK] == 7
    assert storage[Stone.NONE] == 0


@pytest.mark.parametrize("stone", [2, -2])
def test_storage_rejects_unknown_stone(stone):
    storage = StoneTypeDataStorage()
    with pytest.raises(IndexError):
        storage[stone]
    with pytest.raises(IndexError):
        storage[stone] = 1
    assert [storage[s] for s in (Stone.WHITE, Stone.NONE, Stone.BLACK)] == [0, 0, 0]


def test_merge_adds_each_kind():
    a = StoneTypeDataStorage()
    b = StoneTypeDataStorage()
    a[Stone.BLACK] = 2
    b[Stone.BLACK] = 3
    b[Stone.WHITE] = 4
    a.merge(b)
    assert a[Stone.BLACK] == 5
    assert a[Stone.WHITE] == 4
    a += b
    assert a[Stone.WHITE] == 8


def test_storage_with_factory():
    storage = StoneTypeDataStorage(list)
    storage[Stone.BLACK].append("x")
    assert storage[Stone.BLACK] == ["x"]
    assert storage[Stone.WHITE] == []


def test_remove_object_swaps_with_last():
    a, b, c = object(), object(), object()
    items = [a, b, c]
    assert remove_object(a, items) is True
    assert items == [c, b]


def test_remove_object_by_identity():
    first = [1]
    twin = [1]
    items = [first]
    assert remove_object(twin, items) is False
    assert items == [first]
    assert remove_object(first, items) is True
    assert items == []