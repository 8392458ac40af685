"""A fixed-capacity character buffer and a lowercase-letter trie."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase


class BoundedString:
    """A string that accepts characters until its capacity is reached."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._chars: list[str] = []

    def insert(self, char: str) -> bool:
        """Append char; return False and leave the string unchanged when it is full."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if len(self._chars) >= self.capacity:
            return False
        self._chars.append(char)
        return True

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A prefix tree over words made of the letters a to z."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    @staticmethod
    def _check(text: str) -> None:
        for ch in text:
            if ch not in ascii_lowercase:
                raise ValueError(f"only lowercase letters a-z are allowed, got {ch!r}")

    def _walk(self, text: str) -> _TrieNode | None:
        self._check(text)
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        self._check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return True if word was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True if some inserted word begins with prefix."""
        return self._walk(prefix) is not None