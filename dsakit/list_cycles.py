"""Detecting, locating and removing cycles in singly linked chains."""

from __future__ import annotations

from typing import Optional

from dsakit.linked_list import Node


def is_circular(head: Optional[Node]) -> bool:
    """Return True if walking from head leads back to head.

    An empty chain counts as circular. A chain that loops without passing
    through head again is not circular.
    """
    if head is None:
        return True
    seen: set[int] = set()
    node = head.next
    while node is not None and node is not head:
        if id(node) in seen:
            return False
        seen.add(id(node))
        node = node.next
    return node is head


def _floyd_meets(slow: Optional[Node], fast: Optional[Node]) -> Optional[Node]:
    """Advance slow by one and fast by two until they meet or fast runs out."""
    while fast is not None and slow is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
        if slow is not None and slow is fast:
            return slow
    return None


def is_circular_floyd(head: Optional[Node]) -> bool:
    """Return True if the chain holds any cycle; an empty chain counts as circular."""
    if head is None:
        return True
    return _floyd_meets(head, head.next) is not None


def detect_loop_hashing(head: Optional[Node]) -> bool:
    """Return True if some node is reached twice, remembering every visited node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def detect_loop_floyd(head: Optional[Node]) -> bool:
    """Return True if the chain holds a cycle, using slow and fast pointers."""
    if head is None:
        return False
    return _floyd_meets(head, head.next) is not None


def loop_start(head: Optional[Node]) -> Optional[Node]:
    """Return the first node of the cycle, or None if the chain has no cycle."""
    if head is None:
        return None
    meeting = _floyd_meets(head, head)
    if meeting is None:
        return None
    slow = head
    while slow is not meeting:
        slow = slow.next
        meeting = meeting.next
    return slow


def remove_loop(head: Optional[Node]) -> Optional[Node]:
    """Break the cycle, if any, so that the chain ends; return head."""
    start = loop_start(head)
    if start is None:
        return head
    node = start
    while node.next is not start:
        node = node.next
    node.next = None
    return head