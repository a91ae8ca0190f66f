"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, Optional


class Node:
    """A node of a singly linked chain."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional["Node"] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain of nodes holding the values in order and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[Node]) -> list:
    """Return the values of an acyclic chain; raise ValueError if it loops."""
    values = []
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("the list contains a loop")
        seen.add(id(node))
        values.append(node.data)
        node = node.next
    return values


class SinglyLinkedList:
    """A singly linked list with head and tail references and 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_tail(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        return next(islice(self._nodes(), position - 1, None))

    def insert_head(self, value: Any) -> None:
        self.head = Node(value, self.head)
        if self.tail is None:
            self.tail = self.head
        self._size += 1

    def insert_tail(self, value: Any) -> None:
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("position out of range")
        if position == 1:
            self.insert_head(value)
        elif position == self._size + 1:
            self.insert_tail(value)
        else:
            previous = self._node_at(position - 1)
            previous.next = Node(value, previous.next)
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError("position out of range")
        if position == 1:
            node = self.head
            self.head = node.next
            if self.head is None:
                self.tail = None
        else:
            previous = self._node_at(position - 1)
            node = previous.next
            previous.next = node.next
            if node is self.tail:
                self.tail = previous
        node.next = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size


class _DoublyNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[_DoublyNode] = None
        self.next: Optional[_DoublyNode] = None


class DoublyLinkedList:
    """A doubly linked list with 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None
        self._size = 0
        for value in values:
            self.add_tail(value)

    def _nodes(self) -> Iterator[_DoublyNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _DoublyNode:
        return next(islice(self._nodes(), position - 1, None))

    def add_head(self, value: Any) -> None:
        node = _DoublyNode(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def add_tail(self, value: Any) -> None:
        node = _DoublyNode(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("position out of range")
        if position == 1:
            self.add_head(value)
        elif position == self._size + 1:
            self.add_tail(value)
        else:
            previous = self._node_at(position - 1)
            node = _DoublyNode(value)
            node.prev = previous
            node.next = previous.next
            previous.next.prev = node
            previous.next = node
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError("position out of range")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size


class CircularLinkedList:
    """A circular singly linked list reached through a single anchor node.

    The first node inserted becomes the anchor; iteration starts there and
    goes once around the ring.
    """

    def __init__(self) -> None:
        self.tail: Optional[Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        if self.tail is None:
            return
        node = self.tail
        while True:
            yield node
            node = node.next
            if node is self.tail:
                return

    def insert_after(self, element: Any, value: Any) -> None:
        """Insert value after the first node holding element.

        On an empty list the value becomes the only node, whatever element is.
        """
        if self.tail is None:
            node = Node(value)
            node.next = node
            self.tail = node
        else:
            anchor = next((node for node in self._nodes() if node.data == element), None)
            if anchor is None:
                raise ValueError(f"{element!r} is not in the list")
            anchor.next = Node(value, anchor.next)
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding value, searching from the node after the anchor."""
        if self.tail is None:
            raise ValueError("list is empty")
        previous = self.tail
        current = previous.next
        for _ in range(self._size):
            if current.data == value:
                break
            previous, current = current, current.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        if current is previous:
            self.tail = None
        else:
            previous.next = current.next
            if current is self.tail:
                self.tail = previous
        current.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size