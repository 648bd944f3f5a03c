import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    MinHeap,
    exchange_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    min_heap_sort,
    quick_sort,
    sort_012,
)


def test_source_example():
    data = [4, 13, 6, 34, 10]
    expected = [4, 6, 10, 13, 34]
    assert exchange_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert min_heap_sort(data) == expected


def test_empty_and_single():
    assert exchange_sort([]) == []
    assert exchange_sort([7]) == [7]
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]
    assert heap_sort([]) == []
    assert heap_sort([7]) == [7]
    assert quick_sort([]) == []
    assert quick_sort([7]) == [7]
    assert min_heap_sort([]) == []
    assert min_heap_sort([7]) == [7]


def test_does_not_mutate_input():
    data = [3, 1, 2]
    assert exchange_sort(data) == [1, 2, 3]
    assert insertion_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert heap_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert min_heap_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


@given(data=st.lists(st.integers(-1000, 1000), max_size=60))
def test_matches_sorted(data):
    expected = sorted(data)
    assert exchange_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert heap_sort(data) == expected
    assert quick_sort(data) == expected
    assert min_heap_sort(data) == expected


def test_merge_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    keyed = [_Keyed(k, tag) for k, tag in pairs]
    assert [item.tag for item in merge_sort(keyed)] == ["b", "d", "a", "c"]


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __le__(self, other):
        return self.key <= other.key

    def __lt__(self, other):
        return self.key < other.key


def test_min_heap_pops_in_order():
    heap = MinHeap([5, 3, 8, 1])
    assert len(heap) == 4
    assert heap.pop_min() == 1
    assert heap.pop_min() == 3
    assert len(heap) == 2


def test_min_heap_empty_raises():
    heap = MinHeap([])
    with pytest.raises(IndexError):
        heap.pop_min()


def test_min_heap_drains_then_raises():
    heap = MinHeap([9])
    assert heap.pop_min() == 9
    with pytest.raises(IndexError):
        heap.pop_min()


def test_sort_012_source_example():
    data = [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1]
    expected = sorted(data)
    sort_012(data)
    assert data == expected


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_012_property(data):
    expected = sorted(data)
    sort_012(data)
    assert data == expected


def test_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        sort_012([0, 3, 1])