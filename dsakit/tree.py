"""A binary tree with in-order traversal and diameter."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, TextIO, TypeVar

T = TypeVar("T")


class Side(str, Enum):
    """Which child of a node to set."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Node(Generic[T]):
    """A tree node with optional left and right children."""

    value: T
    left: Node[T] | None = None
    right: Node[T] | None = None


class BinaryTree(Generic[T]):
    """A binary tree built node by node."""

    def __init__(self) -> None:
        self.root: Node[T] | None = None
        self._diameter: int | None = None

    def add_node(self, parent: Node[T] | None, side: Side | str | None, value: T) -> Node[T]:
        """Create a node holding value and return it.

        With no parent the node becomes the root; otherwise it becomes the
        parent's child on the given side. An existing subtree there is replaced.
        """
        node = Node(value)
        if parent is None:
            self.root = node
        elif Side(side) is Side.LEFT:
            parent.left = node
        else:
            parent.right = node
        self._diameter = None
        return node

    def in_order(self) -> Iterator[T]:
        """Yield the values in in-order sequence."""
        stack: list[Node[T]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def in_order_print(self, file: TextIO | None = None) -> None:
        """Print the values in order, each followed by a space, then a newline."""
        out = sys.stdout if file is None else file
        out.write("".join(f"{value} " for value in self.in_order()))
        out.write("\n")

    def diameter(self) -> int:
        """Return the number of edges on the longest path, or -1 for an empty tree."""
        if self._diameter is None:
            best = -1

            def height(node: Node[T] | None) -> int:
                nonlocal best
                if node is None:
                    return 0
                left, right = height(node.left), height(node.right)
                best = max(best, left + right)
                return max(left, right) + 1

            height(self.root)
            self._diameter = best
        return self._diameter