"""Deep copies of linked lists whose nodes also carry a random reference."""

from __future__ import annotations

from typing import Any, Optional


class RandomNode:
    """A list node with a ``next`` link and an arbitrary ``random`` link."""

    __slots__ = ("data", "next", "random")

    def __init__(
        self,
        data: Any,
        next: Optional["RandomNode"] = None,
        random: Optional["RandomNode"] = None,
    ) -> None:
        self.data = data
        self.next = next
        self.random = random

    def __repr__(self) -> str:
        return f"RandomNode({self.data!r})"


def copy_list_with_map(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy the list, mapping each original node to its clone."""
    clones: dict[RandomNode, RandomNode] = {}
    clone_head: Optional[RandomNode] = None
    clone_tail: Optional[RandomNode] = None
    node = head
    while node is not None:
        clone = RandomNode(node.data)
        clones[node] = clone
        if clone_tail is None:
            clone_head = clone
        else:
            clone_tail.next = clone
        clone_tail = clone
        node = node.next
    for original, clone in clones.items():
        clone.random = None if original.random is None else clones[original.random]
    return clone_head


def copy_list_interleaved(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Deep-copy the list without extra space by weaving clones between originals.

    The original list is restored before returning.
    """
    if head is None:
        return None
    node = head
    while node is not None:
        node.next = RandomNode(node.data, node.next)
        node = node.next.next

    node = head
    while node is not None:
        if node.random is not None:
            node.next.random = node.random.next
        node = node.next.next

    clone_head = head.next
    node = head
    while node is not None:
        clone = node.next
        node.next = clone.next
        if clone.next is not None:
            clone.next = clone.next.next
        node = node.next
    return clone_head