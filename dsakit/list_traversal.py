"""Reversing, halving and scanning singly linked chains."""

from __future__ import annotations

from typing import Optional

from dsakit.linked_list import Node


def reverse(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place by relinking nodes; return the new head."""
    previous: Optional[Node] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def reverse_recursive(head: Optional[Node]) -> Optional[Node]:
    """Reverse the chain in place recursively; return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def _length(head: Optional[Node]) -> int:
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.next
    return count


def reverse_in_groups(head: Optional[Node], k: int) -> Optional[Node]:
    """Reverse each run of k nodes in place; a final run shorter than k is left as is."""
    if k <= 0:
        raise ValueError("k must be positive")
    if head is None or _length(head) < k:
        return head
    previous: Optional[Node] = None
    node: Optional[Node] = head
    for _ in range(k):
        node.next, previous, node = previous, node, node.next
    if node is not None:
        head.next = reverse_in_groups(node, k)
    return previous


def middle_by_length(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node found by counting; for an even length, the lower middle."""
    if head is None:
        return None
    steps = (_length(head) - 1) // 2
    node = head
    for _ in range(steps):
        node = node.next
    return node


def middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node using slow and fast pointers; for an even length, the upper middle."""
    if head is None or head.next is None:
        return head
    if head.next.next is None:
        return head.next
    slow = head
    fast = head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
    return slow


def is_palindrome_copy(head: Optional[Node]) -> bool:
    """Return True if the chain's values read the same both ways, by copying them out."""
    values = []
    node = head
    while node is not None:
        values.append(node.data)
        node = node.next
    return values == values[::-1]


def is_palindrome(head: Optional[Node]) -> bool:
    """Return True if the chain's values read the same both ways.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    mid = slow
    mid.next = reverse(mid.next)
    try:
        first: Optional[Node] = head
        second = mid.next
        while second is not None:
            if first.data != second.data:
                return False
            first = first.next
            second = second.next
        return True
    finally:
        mid.next = reverse(mid.next)


def remove_sorted_duplicates(head: Optional[Node]) -> Optional[Node]:
    """Unlink repeated neighbours from a sorted chain so each value appears once; return head."""
    node = head
    while node is not None:
        if node.next is not None and node.data == node.next.data:
            node.next = node.next.next
        else:
            node = node.next
    return head