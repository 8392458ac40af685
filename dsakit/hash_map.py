"""A fixed-capacity hash map with separate chaining."""

from __future__ import annotations

from typing import Generic, TypeVar

V = TypeVar("V")


class HashMap(Generic[V]):
    """Map of integer keys to values, stored in `capacity` chained buckets."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._buckets: list[list[tuple[int, V]]] = [[] for _ in range(capacity)]

    def hash(self, key: int) -> int:
        """Return the bucket index of key."""
        return key % self.capacity

    def insert(self, key: int, value: V) -> None:
        """Append a key/value pair; earlier pairs with the same key take precedence."""
        self._buckets[self.hash(key)].append((key, value))

    def get(self, key: int) -> V:
        """Return the value of the first pair stored under key."""
        for stored_key, value in self._buckets[self.hash(key)]:
            if stored_key == key:
                return value
        raise KeyError("Key not found!")

    def remove(self, key: int) -> None:
        """Remove the first pair stored under key."""
        bucket = self._buckets[self.hash(key)]
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                return
        raise KeyError("Key not found!")