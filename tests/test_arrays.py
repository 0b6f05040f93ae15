import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import bubble_sort, delete_at, insert_at, largest, linear_search

int_lists = st.lists(st.integers(-1000, 1000), max_size=40)


def test_bubble_sort_source_example():
    data = [64, 34, 25, 12, 22]
    assert bubble_sort(data) == sorted(data)


def test_bubble_sort_does_not_mutate_input():
    data = [3, 1, 2]
    bubble_sort(data)
    assert data == [3, 1, 2]


@given(int_lists)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


def test_bubble_sort_empty():
    assert bubble_sort([]) == []


def test_delete_at_source_example():
    assert delete_at([1, 2, 99, 3, 4], 2) == [1, 2, 3, 4]


@pytest.mark.parametrize("pos", [-1, 5, 10])
def test_delete_at_out_of_range(pos):
    with pytest.raises(IndexError):
        delete_at([1, 2, 99, 3, 4], pos)


def test_insert_at_source_example():
    assert insert_at([1, 2, 4, 5], 2, 3) == [1, 2, 3, 4, 5]


def test_insert_at_end_appends():
    result = insert_at([7, 8], 2, 9)
    assert result[-1] == 9 and result[:2] == [7, 8]


@pytest.mark.parametrize("pos", [-1, 5])
def test_insert_at_out_of_range(pos):
    with pytest.raises(IndexError):
        insert_at([1, 2, 4, 5], pos, 3)


@given(int_lists, st.integers(), st.data())
def test_insert_then_delete_round_trip(values, value, data):
    pos = data.draw(st.integers(0, len(values)))
    inserted = insert_at(values, pos, value)
    assert len(inserted) == len(values) + 1
    assert inserted[pos] == value
    assert delete_at(inserted, pos) == values


def test_largest_source_example():
    data = [10, 50, 20, 80, 30]
    assert largest(data) == max(data)


@given(st.lists(st.integers(), min_size=1))
def test_largest_is_upper_bound_and_member(values):
    result = largest(values)
    assert result in values
    assert all(v <= result for v in values)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_linear_search_source_example():
    assert linear_search([10, 20, 30, 40, 50], 30) == 2


def test_linear_search_missing_returns_none():
    assert linear_search([10, 20, 30, 40, 50], 35) is None


@given(int_lists, st.integers(-1000, 1000))
def test_linear_search_finds_first_occurrence(values, target):
    index = linear_search(values, target)
    if target in values:
        assert index == values.index(target)
    else:
        assert index is None