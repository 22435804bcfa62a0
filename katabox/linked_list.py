"""Singly linked lists and a few algorithms that work on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: Any = 0, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every complete group of ``k`` nodes in place.

    A trailing group shorter than ``k`` keeps its order. The nodes themselves
    are relinked, not copied; the new head is returned.
    """
    if k < 1:
        raise ValueError("group size must be at least 1")
    nodes = list(_nodes(head))
    full = len(nodes) - len(nodes) % k
    if full == 0:
        return head

    ordered: list[ListNode] = []
    for start in range(0, full, k):
        ordered.extend(reversed(nodes[start:start + k]))
    ordered.extend(nodes[full:])

    for node, following in zip(ordered, ordered[1:]):
        node.next = following
    ordered[-1].next = None
    return ordered[0]


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same forwards and backwards."""
    values = to_values(head)
    return values == values[::-1]