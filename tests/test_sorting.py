import io
import random

import pytest

from pushswap.sorting import (
    bubble_sort,
    index_values,
    is_sorted,
    radix_sort,
    select_algorithm,
    sort_small,
    sort_three,
    sort_two,
)
from pushswap.stacks import Stacks


def _stacks(values):
    out = io.StringIO()
    return Stacks(values, out), out


def _replay(values, text):
    stacks = Stacks(values, io.StringIO())
    for move in text.split():
        getattr(stacks, move)()
    return list(stacks.a), list(stacks.b)


def test_bubble_sort_orders_values():
    assert bubble_sort([3, -1, 2]) == [-1, 2, 3]


def test_bubble_sort_matches_sorted_and_leaves_input():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(40)]
    original = list(values)
    assert bubble_sort(values) == sorted(values)
    assert values == original


def test_index_values_ranks():
    assert index_values([-5, 10, 0]) == [0, 2, 1]


def test_index_values_maps_back_to_sorted_values():
    rng = random.Random(5)
    values = rng.sample(range(-1000, 1000), 30)
    ranks = index_values(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered = sorted(values)
    assert [ordered[r] for r in ranks] == values


@pytest.mark.parametrize(
    "values, expected",
    [([0, 1, 2], True), ([0, 2, 1], False), ([5], False), ([], False), ([2, 1], False)],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_sort_two_swaps_descending_pair():
    stacks, out = _stacks([1, 0])
    sort_two(stacks)
    assert list(stacks.a) == [0, 1]
    assert out.getvalue() == "sa\n"


def test_sort_two_leaves_ascending_pair():
    stacks, out = _stacks([0, 1])
    sort_two(stacks)
    assert list(stacks.a) == [0, 1]
    assert out.getvalue() == ""


@pytest.mark.parametrize(
    "values, moves",
    [
        ([1, 0, 2], "sa\n"),
        ([2, 1, 0], "sa\nrra\n"),
        ([2, 0, 1], "ra\n"),
        ([0, 2, 1], "sa\nra\n"),
        ([1, 2, 0], "rra\n"),
        ([0, 1, 2], ""),
    ],
)
def test_sort_three_cases(values, moves):
    stacks, out = _stacks(values)
    sort_three(stacks)
    assert list(stacks.a) == [0, 1, 2]
    assert out.getvalue() == moves


def test_sort_three_ignores_short_stack():
    stacks, out = _stacks([1, 0])
    sort_three(stacks)
    assert list(stacks.a) == [1, 0]
    assert out.getvalue() == ""


def test_sort_small_reverse_five():
    stacks, out = _stacks([4, 3, 2, 1, 0])
    sort_small(stacks)
    assert list(stacks.a) == [0, 1, 2, 3, 4]
    assert out.getvalue().split() == ["rra", "pb", "rra", "pb", "sa", "rra", "pa", "pa"]


@pytest.mark.parametrize("size", [4, 5, 6, 10, 32])
def test_sort_small_sorts_and_replays(size):
    rng = random.Random(size)
    values = rng.sample(range(size), size)
    stacks, out = _stacks(values)
    sort_small(stacks)
    assert list(stacks.a) == list(range(size))
    assert list(stacks.b) == []
    assert _replay(values, out.getvalue()) == (list(range(size)), [])


def test_radix_sort_sorts_ranks():
    rng = random.Random(42)
    values = rng.sample(range(100), 100)
    stacks, out = _stacks(values)
    radix_sort(stacks)
    assert list(stacks.a) == list(range(100))
    assert _replay(values, out.getvalue()) == (list(range(100)), [])


def test_radix_sort_single_element_does_nothing():
    stacks, out = _stacks([0])
    radix_sort(stacks)
    assert list(stacks.a) == [0]
    assert out.getvalue() == ""


def test_radix_sort_rejects_negative_maximum():
    stacks, _ = _stacks([-3, -1, -2])
    with pytest.raises(ValueError):
        radix_sort(stacks)


def test_select_reports_already_sorted():
    stacks, out = _stacks([0, 1, 2, 3])
    assert select_algorithm(stacks) is True
    assert out.getvalue() == ""


def test_select_single_value_does_nothing():
    stacks, out = _stacks([0])
    assert select_algorithm(stacks) is False
    assert list(stacks.a) == [0]
    assert out.getvalue() == ""


@pytest.mark.parametrize("size", [2, 3, 5, 20, 33, 120])
def test_select_sorts_every_size(size):
    rng = random.Random(size * 17)
    values = rng.sample(range(size), size)
    if values == sorted(values):
        values.reverse()
    stacks, out = _stacks(values)
    assert select_algorithm(stacks) is False
    assert list(stacks.a) == list(range(size))
    assert _replay(values, out.getvalue()) == (list(range(size)), [])


def test_sorted_ranks_map_back_to_sorted_input():
    rng = random.Random(9)
    values = rng.sample(range(-500, 500), 8)
    ranks = index_values(values)
    stacks, _ = _stacks(ranks)
    select_algorithm(stacks)
    ordered = sorted(values)
    assert [ordered[r] for r in stacks.a] == ordered