"""A minimal singly linked list of arbitrary contents.

Functions that may change which node is the head return the new head,
so callers write ``head = lst_add_front(head, node)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One cell of a singly linked list."""

    content: Any = None
    next: ListNode | None = None

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node after it."""
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next


def lst_add_front(head: ListNode | None, node: ListNode | None) -> ListNode | None:
    """Put ``node`` before ``head`` and return the new head.

    A missing node leaves the list unchanged.
    """
    if node is None:
        return head
    node.next = head
    return node


def lst_last(head: ListNode | None) -> ListNode | None:
    """Return the last node of the list, or None for an empty list."""
    last = None
    if head is not None:
        for last in head:
            pass
    return last


def lst_add_back(head: ListNode | None, node: ListNode | None) -> ListNode | None:
    """Append ``node`` after the last node and return the head.

    An empty list becomes ``node``; a missing node leaves the list unchanged.
    """
    if node is None:
        return head
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_size(head: ListNode | None) -> int:
    """Return the number of nodes in the list."""
    if head is None:
        return 0
    return sum(1 for _ in head)