import pytest

from algolab.search import (
    binary_search,
    find_pairs,
    interpolation_search,
    jump_search,
)

ARR = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
SPARSE = [2, 3, 7, 11, 19, 23, 40, 41, 58, 77, 90, 91, 100]


@pytest.mark.parametrize("arr", [ARR, SPARSE])
def test_binary_search_finds_every_element(arr):
    for x in arr:
        assert arr[binary_search(arr, x)] == x


def test_binary_search_last_element():
    assert binary_search(ARR, 10) == len(ARR) - 1


@pytest.mark.parametrize("x", [0, 12, -5])
def test_binary_search_absent(x):
    assert binary_search(ARR, x) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@pytest.mark.parametrize("arr", [ARR, SPARSE, [5, 5, 5]])
def test_interpolation_search_finds_every_element(arr):
    for x in arr:
        assert arr[interpolation_search(arr, x)] == x


@pytest.mark.parametrize("x", [1, 4, 50, 101])
def test_interpolation_search_absent(x):
    assert interpolation_search(SPARSE, x) == -1


@pytest.mark.parametrize("arr", [ARR, SPARSE, list(range(0, 64, 3))])
def test_jump_search_finds_every_element(arr):
    for x in arr:
        result = jump_search(arr, x)
        assert arr[result.index] == x
        assert result.visited[-1] == result.index


@pytest.mark.parametrize("x", [0, 4, 50, 200])
def test_jump_search_absent(x):
    result = jump_search(SPARSE, x)
    assert result.index == -1
    assert all(0 <= i < len(SPARSE) for i in result.visited)


def test_jump_search_visit_order():
    arr = list(range(16))
    result = jump_search(arr, 6)
    assert result.index == 6
    assert result.visited == [0, 4, 8, 5, 6]


def test_jump_search_empty():
    assert jump_search([], 1).index == -1


def test_find_pairs_equal_sums():
    arr = [3, 4, 7, 1, 2, 9, 8]
    found = find_pairs(arr)
    assert found is not None
    (a, b), (c, d) = found
    assert a + b == c + d
    assert {a, b, c, d} <= set(arr)
    assert (a, b) != (c, d)


def test_find_pairs_none():
    assert find_pairs([1, 2, 3]) is None
    assert find_pairs([]) is None