"""A LIFO stack of integers built on a singly linked chain of nodes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    next: Optional["_Node"] = None


class LinkedStack:
    """Stack whose top is the head of a singly linked chain."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self.is_empty():
            raise IndexError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def count_nodes(self) -> int:
        """Count the nodes by walking the chain."""
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration and print the stack."""
    _ = sys.argv[1:] if argv is None else argv
    stack = LinkedStack()
    for value in (10, 11, 12, 13):
        stack.push(value)
    stack.pop()
    stack.push(14)
    stack.pop()
    stack.push(15)
    print(f"Size stack: {len(stack)}")
    print(f"Size stack: {stack.count_nodes()}")
    print(" ".join(str(value) for value in stack))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())