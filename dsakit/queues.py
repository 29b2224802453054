"""First-in, first-out queues of integers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["QueueFullError", "QueueEmptyError", "ArrayQueue", "LinkedQueue"]


class QueueFullError(Exception):
    """Raised when enqueueing onto a queue that has reached its capacity."""


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeueing an empty queue."""


class ArrayQueue:
    """A queue stored in a circular buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._slots: list[int | None] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """The largest number of elements the queue can hold."""
        return len(self._slots)

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % len(self._slots)

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots[self._slot(self._size)] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the element at the front."""
        value = self.front()
        self._slots[self._front] = None
        self._front = self._slot(1)
        self._size -= 1
        return value

    def front(self) -> int:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        assert value is not None
        return value

    def rear(self) -> int:
        """Return the element at the rear without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._slot(self._size - 1)]
        assert value is not None
        return value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._size == 0

    def is_full(self) -> bool:
        """Return True if the queue holds as many elements as its capacity."""
        return self._size == len(self._slots)


@dataclass(slots=True)
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """A queue built from singly linked nodes; it grows without bound."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the element at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the element at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def rear(self) -> int:
        """Return the element at the rear without removing it."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        return self._rear.value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._front is None