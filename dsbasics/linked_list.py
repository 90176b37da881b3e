"""A doubly linked list of integers with index-based insertion and removal."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


class DoublyLinkedList:
    """Doubly linked list that walks from whichever end is nearer to an index."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values or ():
            self.add_at_tail(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("list indices must be integers")
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        return self._node_at(index).value

    def _node_at(self, index: int) -> _Node:
        """Return the node at a valid index, starting from the nearer end."""
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def is_empty(self) -> bool:
        return self._size == 0

    def get(self, index: int) -> int:
        """Return the value at ``index``, or -1 when the index is out of range."""
        if not 0 <= index < self._size:
            return -1
        return self._node_at(index).value

    def add_at_head(self, value: int) -> None:
        node = _Node(value)
        if self.is_empty():
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def add_at_tail(self, value: int) -> None:
        node = _Node(value)
        if self.is_empty():
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_at_index(self, index: int, value: int) -> None:
        """Insert before position ``index``; indices outside 0..len are ignored."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(value)
            return
        if index == self._size:
            self.add_at_tail(value)
            return
        before = self._node_at(index - 1)
        node = _Node(value, next=before.next, prev=before)
        before.next.prev = node
        before.next = node
        self._size += 1

    def delete_first(self) -> int:
        """Remove and return the first value."""
        if self.is_empty():
            raise IndexError("delete from empty list")
        old = self._head
        self._head = old.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        old.next = None
        self._size -= 1
        return old.value

    def delete_last(self) -> int:
        """Remove and return the last value."""
        if self.is_empty():
            raise IndexError("delete from empty list")
        old = self._tail
        self._tail = old.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        old.prev = None
        self._size -= 1
        return old.value

    def delete_at_index(self, index: int) -> None:
        """Remove the value at ``index``; indices out of range are ignored."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self.delete_first()
            return
        if index == self._size - 1:
            self.delete_last()
            return
        removed = self._node_at(index)
        removed.prev.next = removed.next
        removed.next.prev = removed.prev
        removed.next = removed.prev = None
        self._size -= 1


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration and print the resulting list."""
    _ = sys.argv[1:] if argv is None else argv
    items = DoublyLinkedList()
    items.add_at_head(7)
    items.add_at_head(2)
    items.add_at_head(1)
    items.add_at_index(3, 0)
    items.delete_at_index(2)
    items.add_at_head(6)
    items.add_at_tail(4)
    print(f"value: {items.get(4)}")
    items.add_at_head(4)
    items.add_at_index(5, 0)
    items.add_at_head(6)
    print(" ".join(str(value) for value in items))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())