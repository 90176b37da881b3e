# dsbasics

Three classic data structures, written plainly in Python:

- `dsbasics.linked_list.DoublyLinkedList` is a doubly linked list of integers
  with insertion and deletion by index. To reach an index it walks from
  whichever end is closer.
- `dsbasics.array_queue.ArrayQueue` is a FIFO queue kept in a fixed-size
  circular array.
- `dsbasics.linked_stack.LinkedStack` is a LIFO stack built from singly linked
  nodes.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## DoublyLinkedList

```python
from dsbasics.linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 7])
items.add_at_index(3, 0)    # index 3 is the end, so 0 is appended
items.delete_at_index(2)    # removes the 7
items.add_at_head(6)
items.add_at_tail(4)
print(list(items))          # [6, 1, 2, 0, 4]
print(items[1], items[-1])  # 1 4
print(items.get(10))        # -1
print(list(reversed(items)), len(items), items.is_empty())
```

- `get(index)` returns `-1` when the index is out of range. Indexing with
  `items[i]` accepts negative indices and raises `IndexError` when the index is
  out of range.
- `add_at_index(index, value)` inserts before position `index`. It does nothing
  unless `0 <= index <= len(items)`.
- `delete_at_index(index)` does nothing when the index is out of range.
- `delete_first()` and `delete_last()` remove a value and return it. Both raise
  `IndexError` on an empty list.

## ArrayQueue

```python
from dsbasics.array_queue import ArrayQueue

queue = ArrayQueue(3)
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue())   # 1
print(queue.size(), queue.is_empty(), queue.is_full())
print(queue.slots())     # [0, 2, 0]; a slot is reset to 0 once its value is dequeued
print(queue.first, queue.last, queue.capacity)
print(queue)             # [0, 2, 0]
```

The capacity must be positive, otherwise `ValueError` is raised. `enqueue`
raises `IndexError` when the queue is full, and `dequeue` raises `IndexError`
when it is empty. `first` is the slot that holds the next value to be
dequeued. `last` is the slot that the next enqueued value goes into.

## LinkedStack

```python
from dsbasics.linked_stack import LinkedStack

stack = LinkedStack()
stack.push(10)
stack.push(11)
print(str(stack))                        # 11 -> 10
print(stack.pop())                       # 11
print(len(stack), stack.count_nodes())   # 1 1
print(list(stack), stack.is_empty())
```

Iteration runs from the top of the stack down. `len()` uses a stored count,
while `count_nodes()` walks the chain. `pop` raises `IndexError` when the stack
is empty.

## Demo commands

Each structure comes with a short demonstration. It prints the state of the
structure after a fixed sequence of operations:

```
dsbasics-list-demo
dsbasics-queue-demo
dsbasics-stack-demo
```