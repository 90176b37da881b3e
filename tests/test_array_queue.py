import pytest

from dsbasics.array_queue import ArrayQueue, main


def test_fifo_order():
    queue = ArrayQueue(5)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)
    with pytest.raises(ValueError):
        ArrayQueue(-3)


def test_dequeue_empty_raises():
    queue = ArrayQueue(3)
    with pytest.raises(IndexError):
        queue.dequeue()


def test_enqueue_full_raises():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(IndexError):
        queue.enqueue(3)
    assert queue.slots() == [1, 2]


def test_size_tracks_contents():
    queue = ArrayQueue(4)
    assert queue.size() == 0
    queue.enqueue(7)
    queue.enqueue(8)
    assert queue.size() == 2
    queue.dequeue()
    assert queue.size() == 1


def test_wraparound_preserves_order():
    queue = ArrayQueue(3)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    queue.enqueue(4)
    assert queue.is_full()
    assert queue.slots() == [4, 2, 3]
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]


def test_dequeued_slots_are_zeroed():
    queue = ArrayQueue(3)
    queue.enqueue(9)
    queue.enqueue(8)
    queue.dequeue()
    assert queue.slots() == [0, 8, 0]
    assert queue.first == 1
    assert queue.last == 2


def test_slots_is_a_copy():
    queue = ArrayQueue(2)
    queue.enqueue(5)
    copy = queue.slots()
    copy[0] = 99
    assert queue.dequeue() == 5


def test_str_lists_every_slot():
    queue = ArrayQueue(4)
    queue.enqueue(3)
    queue.enqueue(6)
    assert str(queue) == "[3, 6, 0, 0]"
    assert str(queue) == str(queue.slots())


def test_main_prints_state(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "First: 4, Last: 4"
    assert lines[1] == str([0] * 10)