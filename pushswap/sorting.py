"""Sorting strategies that solve stack ``a`` using only stack moves."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise

from .stacks import Stacks, find_max, find_min_position

SMALL_SORT_LIMIT = 32


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def index_values(values: Iterable[int]) -> list[int]:
    """Replace every value by its rank among all the values, keeping the order."""
    values = list(values)
    ranks: dict[int, int] = {}
    for rank, value in enumerate(bubble_sort(values)):
        ranks.setdefault(value, rank)
    return [ranks[value] for value in values]


def is_sorted(values: Iterable[int]) -> bool:
    """True when there are at least two values and each is smaller than the next."""
    values = list(values)
    return len(values) >= 2 and all(a < b for a, b in pairwise(values))


def sort_two(stacks: Stacks) -> None:
    """Swap the top two elements of ``a`` when they are out of order."""
    if len(stacks.a) >= 2 and stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order the top three elements of ``a`` in at most two moves."""
    if len(stacks.a) < 3:
        return
    a, b, c = stacks.a[0], stacks.a[1], stacks.a[2]
    if a > b and c > a:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > c and c > b:
        stacks.ra()
    elif b > c and c > a:
        stacks.sa()
        stacks.ra()
    elif b > a and a > c:
        stacks.rra()


def sort_small(stacks: Stacks) -> None:
    """Push minima to ``b`` until three remain, sort those, then bring ``b`` back."""
    while len(stacks.a) > 3:
        position = find_min_position(stacks.a)
        smallest = min(stacks.a)
        rotate = stacks.rra if position > 3 else stacks.ra
        while stacks.a[0] != smallest:
            rotate()
        stacks.pb()
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary LSD radix sort of ``a``, which must hold non-negative ranks."""
    size = len(stacks.a)
    largest = find_max(stacks.a)
    if largest < 0:
        raise ValueError("radix sort needs a non-negative maximum")
    for bit in range(largest.bit_length()):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def select_algorithm(stacks: Stacks) -> bool:
    """Sort ``a`` with the strategy suited to its size.

    Returns True, without moving anything, when ``a`` is already sorted.
    """
    count = len(stacks.a)
    if is_sorted(stacks.a):
        return True
    if count == 2:
        sort_two(stacks)
    elif count == 3:
        sort_three(stacks)
    elif 3 < count <= SMALL_SORT_LIMIT:
        sort_small(stacks)
    else:
        radix_sort(stacks)
    return False