"""Singly linked lists: building, merging and reversing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["ListNode", "linked_list", "merge_two_lists", "reverse_list"]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def linked_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values``; an empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``list2`` comes first.
    """
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    prev: ListNode | None = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev