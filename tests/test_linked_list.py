import pytest

from dsakit.linked_list import (
    CircularLinkedList,
    DoublyLinkedList,
    Node,
    SinglyLinkedList,
    from_values,
    to_values,
)


def test_from_values_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    assert to_values(from_values(values)) == values


def test_from_values_empty_gives_none():
    assert from_values([]) is None
    assert to_values(None) == []


def test_from_values_links_nodes_in_order():
    head = from_values([1, 2])
    assert head.data == 1
    assert head.next.data == 2
    assert head.next.next is None


def test_to_values_rejects_loop():
    head = from_values([7, 8, 9])
    head.next.next.next = head.next
    with pytest.raises(ValueError):
        to_values(head)


def test_node_repr_does_not_follow_links():
    node = Node(5)
    node.next = node
    assert repr(node) == "Node(5)"


def test_singly_source_example():
    linked = SinglyLinkedList([7])
    linked.insert_head(6)
    linked.insert_tail(8)
    linked.insert_tail(9)
    linked.insert_at(5, 10)
    assert linked.delete_at(5) == 10
    assert list(linked) == [6, 7, 8, 9]
    assert len(linked) == 4


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_singly_insert_then_delete_restores(position):
    values = [1, 2, 3]
    linked = SinglyLinkedList(values)
    linked.insert_at(position, 99)
    assert list(linked)[position - 1] == 99
    assert len(linked) == len(values) + 1
    assert linked.delete_at(position) == 99
    assert list(linked) == values


def test_singly_tail_tracks_deletions():
    linked = SinglyLinkedList([1, 2, 3])
    linked.delete_at(3)
    linked.insert_tail(4)
    assert list(linked) == [1, 2, 4]
    assert linked.tail.data == 4


def test_singly_delete_last_node_empties():
    linked = SinglyLinkedList([5])
    assert linked.delete_at(1) == 5
    assert list(linked) == []
    assert linked.head is None and linked.tail is None


@pytest.mark.parametrize("position", [0, 5])
def test_singly_insert_out_of_range(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert_at(position, 0)


@pytest.mark.parametrize("position", [0, 4])
def test_singly_delete_out_of_range(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.delete_at(position)


def test_doubly_source_example():
    linked = DoublyLinkedList([9])
    linked.add_head(7)
    linked.add_tail(7)
    linked.insert_at(2, 5)
    assert linked.delete_at(1) == 7
    assert list(linked) == [5, 9, 7]
    assert len(linked) == 3


def test_doubly_reversed_matches_forward():
    linked = DoublyLinkedList([1, 2, 3, 4])
    linked.insert_at(3, 10)
    linked.delete_at(1)
    linked.delete_at(len(linked))
    assert list(reversed(linked)) == list(linked)[::-1]


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_doubly_insert_then_delete_restores(position):
    values = [1, 2, 3]
    linked = DoublyLinkedList(values)
    linked.insert_at(position, 99)
    assert list(linked)[position - 1] == 99
    assert list(reversed(linked)) == list(linked)[::-1]
    assert linked.delete_at(position) == 99
    assert list(linked) == values
    assert list(reversed(linked)) == values[::-1]


def test_doubly_delete_only_node():
    linked = DoublyLinkedList([3])
    assert linked.delete_at(1) == 3
    assert list(linked) == []
    assert list(reversed(linked)) == []


def test_doubly_out_of_range():
    linked = DoublyLinkedList([1])
    with pytest.raises(IndexError):
        linked.insert_at(3, 0)
    with pytest.raises(IndexError):
        linked.delete_at(2)


def test_circular_source_example():
    ring = CircularLinkedList()
    ring.insert_after(5, 3)
    ring.insert_after(3, 5)
    ring.insert_after(3, 9)
    assert list(ring) == [3, 9, 5]
    assert len(ring) == 3


def test_circular_ring_closes():
    ring = CircularLinkedList()
    ring.insert_after(0, 1)
    ring.insert_after(1, 2)
    ring.insert_after(2, 3)
    node = ring.tail
    for _ in range(len(ring)):
        node = node.next
    assert node is ring.tail


def test_circular_delete_anchor_moves_anchor():
    ring = CircularLinkedList()
    ring.insert_after(0, 1)
    ring.insert_after(1, 2)
    ring.insert_after(2, 3)
    ring.delete(1)
    assert sorted(ring) == [2, 3]
    assert len(ring) == 2
    assert 1 not in list(ring)


def test_circular_delete_only_node_empties():
    ring = CircularLinkedList()
    ring.insert_after(0, 4)
    ring.delete(4)
    assert list(ring) == []
    assert ring.tail is None


def test_circular_delete_missing_value():
    ring = CircularLinkedList()
    ring.insert_after(0, 4)
    with pytest.raises(ValueError):
        ring.delete(5)


def test_circular_delete_from_empty():
    with pytest.raises(ValueError):
        CircularLinkedList().delete(1)


def test_circular_insert_after_missing_element():
    ring = CircularLinkedList()
    ring.insert_after(0, 4)
    with pytest.raises(ValueError):
        ring.insert_after(8, 1)
    assert list(ring) == [4]