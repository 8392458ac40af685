"""First-in first-out queues."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when an element is taken from or read off an empty queue."""

    def __init__(self, message: str = "Can't pop element from an empty queue.") -> None:
        super().__init__(message)


class Queue(Generic[T]):
    """A basic FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        """Add value at the back."""
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the front element."""
        if not self._items:
            raise EmptyQueueError()
        return self._items.popleft()

    def front(self) -> T:
        """Return the front element without removing it."""
        if not self._items:
            raise EmptyQueueError("Can't read the front of an empty queue.")
        return self._items[0]

    def back(self) -> T:
        """Return the back element without removing it."""
        if not self._items:
            raise EmptyQueueError("Can't read the back of an empty queue.")
        return self._items[-1]


class BetterQueue(Queue[T]):
    """A queue that also reports its size, iterates, chains pushes and concatenates."""

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __lshift__(self, value: T) -> BetterQueue[T]:
        """Push value and return the queue, so pushes can be chained."""
        self.push(value)
        return self

    def __add__(self, other: BetterQueue[T]) -> BetterQueue[T]:
        """Return a new queue with this queue's elements followed by other's."""
        if not isinstance(other, BetterQueue):
            return NotImplemented
        combined: BetterQueue[T] = BetterQueue()
        combined._items.extend(self._items)
        combined._items.extend(other._items)
        return combined