"""Last-in first-out stacks: a plain one and one that is safe to share between threads."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when an element is taken from or read off an empty stack."""

    def __init__(self, message: str = "Stack is empty.") -> None:
        super().__init__(message)


class Stack(Generic[T]):
    """A basic LIFO stack."""

    MAX_SIZE = 4294967295

    def __init__(self) -> None:
        self._items: list[T] = []

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: T) -> None:
        """Put value on top."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]


class ThreadSafeStack(Generic[T]):
    """A LIFO stack whose operations are guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put value on top."""
        with self._lock:
            self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        with self._lock:
            if not self._items:
                raise EmptyStackError()
            return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it."""
        with self._lock:
            if not self._items:
                raise EmptyStackError()
            return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        with self._lock:
            return not self._items