"""A graph that keeps its vertices in insertion order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Vertex(Generic[T]):
    """A vertex with an identifier and a value."""

    id: int
    value: T


class Graph(Generic[T]):
    """A collection of vertices, kept in the order they were created."""

    def __init__(self) -> None:
        self._vertices: list[Vertex[T]] = []

    def create_vertex(self, vertex_id: int, value: T) -> Vertex[T]:
        """Create a vertex, append it after the existing ones and return it."""
        vertex = Vertex(vertex_id, value)
        self._vertices.append(vertex)
        return vertex

    def vertices(self) -> list[Vertex[T]]:
        """Return the vertices in creation order."""
        return list(self._vertices)