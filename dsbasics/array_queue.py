"""A fixed-capacity FIFO queue stored in a circular array."""

from __future__ import annotations

import sys


class ArrayQueue:
    """Circular-buffer queue of integers; vacated slots are reset to 0.

    ``first`` is the slot of the next value to dequeue and ``last`` the slot
    the next enqueued value goes into.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._array = [0] * capacity
        self.first = 0
        self.last = 0
        self._count = 0

    def enqueue(self, value: int) -> None:
        """Add a value at the end of the queue."""
        if self.is_full():
            raise IndexError("queue is full")
        self._array[self.last] = value
        self.last = (self.last + 1) % self.capacity
        self._count += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._array[self.first]
        self._array[self.first] = 0
        self.first = (self.first + 1) % self.capacity
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def size(self) -> int:
        return self._count

    def slots(self) -> list[int]:
        """Return a copy of the underlying storage, slot by slot."""
        return list(self._array)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._array) + "]"


def main(argv: list[str] | None = None) -> int:
    """Run a short wrap-around demonstration and print the queue state."""
    _ = sys.argv[1:] if argv is None else argv
    queue = ArrayQueue(10)
    for value in range(1, 5):
        queue.enqueue(value)
    for _ in range(4):
        queue.dequeue()
    for value in range(5, 15):
        queue.enqueue(value)
    for _ in range(10):
        queue.dequeue()
    print(f"First: {queue.first}, Last: {queue.last}")
    print(queue)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())