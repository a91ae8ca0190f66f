"""Sorting and merging singly linked chains."""

from __future__ import annotations

from collections import Counter
from heapq import merge
from itertools import chain, repeat
from typing import Optional

from dsakit.linked_list import Node, from_values


def _lower_middle(head: Node) -> Node:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _merge_nodes(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Relink two sorted chains into one; on equal values the right node goes first."""
    dummy = Node(None)
    tail = dummy
    while left is not None and right is not None:
        if left.data < right.data:
            tail.next, tail, left = left, left, left.next
        else:
            tail.next, tail, right = right, right, right.next
    tail.next = left if left is not None else right
    return dummy.next


def merge_sort_list(head: Optional[Node]) -> Optional[Node]:
    """Sort the chain in place by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    mid = _lower_middle(head)
    right = mid.next
    mid.next = None
    return _merge_nodes(merge_sort_list(head), merge_sort_list(right))


def _weave(small: Node, large: Node) -> Node:
    """Splice the nodes of ``large`` into ``small``, whose first value is not greater."""
    if small.next is None:
        small.next = large
        return small
    current, following = small, small.next
    incoming: Optional[Node] = large
    while following is not None and incoming is not None:
        if current.data <= incoming.data <= following.data:
            rest = incoming.next
            current.next = incoming
            incoming.next = following
            current = incoming
            incoming = rest
        else:
            current, following = following, following.next
            if following is None:
                current.next = incoming
                return small
    return small


def merge_sorted_in_place(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two sorted chains by relinking their nodes; return the merged head."""
    if first is None:
        return second
    if second is None:
        return first
    if first.data <= second.data:
        return _weave(first, second)
    return _weave(second, first)


def _values(head: Optional[Node]):
    node = head
    while node is not None:
        yield node.data
        node = node.next


def merge_sorted_copy(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two sorted chains into a new chain, leaving both inputs untouched.

    If either chain is empty the other one is returned as it is.
    """
    if first is None:
        return second
    if second is None:
        return first
    return from_values(merge(_values(first), _values(second)))


def _check_012(head: Optional[Node]) -> None:
    for value in _values(head):
        if value not in (0, 1, 2):
            raise ValueError(f"values must be 0, 1 or 2, not {value!r}")


def sort_012_counting(head: Optional[Node]) -> Optional[Node]:
    """Sort a chain of 0s, 1s and 2s by counting them and rewriting the values."""
    _check_012(head)
    counts = Counter(_values(head))
    ordered = chain.from_iterable(repeat(value, counts[value]) for value in (0, 1, 2))
    node = head
    for value in ordered:
        node.data = value
        node = node.next
    return head


def sort_012_relink(head: Optional[Node]) -> Optional[Node]:
    """Sort a chain of 0s, 1s and 2s by relinking its nodes into three runs."""
    if head is None:
        return None
    _check_012(head)
    dummies = [Node(None) for _ in range(3)]
    tails = list(dummies)
    node = head
    while node is not None:
        following = node.next
        tails[node.data].next = node
        tails[node.data] = node
        node = following
    tails[2].next = None
    tails[1].next = dummies[2].next
    tails[0].next = dummies[1].next if dummies[1].next is not None else dummies[2].next
    return dummies[0].next