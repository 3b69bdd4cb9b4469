"""The two stacks of the puzzle and the moves allowed on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from typing import TextIO


class Stacks:
    """Stacks ``a`` and ``b``, top first, with every move reported by name.

    A move that cannot act, such as swapping a stack with fewer than two
    elements or pushing from an empty stack, changes nothing and writes
    nothing.
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self._out = out

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(f"{name}\n")

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Run ``sa`` and ``sb``, then report ``ss``."""
        self.sa()
        self.sb()
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Run ``ra`` and ``rb``, then report ``rr``."""
        self.ra()
        self.rb()
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Run ``rra`` and ``rrb``, then report ``rrr``."""
        self.rra()
        self.rrb()
        self._emit("rrr")


def find_max(values: Iterable[int]) -> int:
    """Return the largest value, or 0 when there is none."""
    return max(values, default=0)


def find_min_position(values: Iterable[int]) -> int:
    """Return the 1-based position of the first smallest value, or 0 if empty."""
    best_position = 0
    best_value = 0
    for position, value in enumerate(values, start=1):
        if best_position == 0 or value < best_value:
            best_position, best_value = position, value
    return best_position


def format_stack(values: Iterable[int]) -> str:
    """Render a stack top first as ``v1 -> v2 -> NULL``."""
    return "".join(f"{value} -> " for value in values) + "NULL"