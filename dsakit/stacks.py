"""Last-in, first-out stacks of integers with three different storage schemes."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["StackFullError", "StackEmptyError", "ArrayStack", "LinkedStack", "ListStack"]


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking at an empty stack."""


class ArrayStack:
    """A stack backed by a preallocated array of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._slots: list[int | None] = [None] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        """The largest number of elements the stack can hold."""
        return len(self._slots)

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        if self._top == len(self._slots) - 1:
            raise StackFullError("stack is full")
        self._top += 1
        self._slots[self._top] = value

    def pop(self) -> int:
        """Remove and return the top element."""
        value = self.peek()
        self._slots[self._top] = None
        self._top -= 1
        return value

    def peek(self) -> int:
        """Return the top element without removing it."""
        if self._top == -1:
            raise StackEmptyError("stack is empty")
        value = self._slots[self._top]
        assert value is not None
        return value

    def __len__(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return self._top == -1


@dataclass(slots=True)
class _Node:
    value: int
    below: _Node | None = None


class LinkedStack:
    """A stack built from singly linked nodes; it grows without bound."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._size = 0

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top element."""
        if self._head is None:
            raise StackEmptyError("stack is empty")
        node = self._head
        self._head = node.below
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the top element without removing it."""
        if self._head is None:
            raise StackEmptyError("stack is empty")
        return self._head.value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return self._head is None


class ListStack:
    """A stack backed by a growable list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items