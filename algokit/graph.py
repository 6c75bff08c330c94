"""Directed weighted graph stored as adjacency lists."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from algokit.linked_list import LinkedList, ListItem


@dataclass(eq=False)
class Edge:
    """An outgoing edge that points at ``to_vertex``."""

    to_vertex: Vertex
    weight: int = 0


@dataclass(eq=False)
class Vertex:
    """A graph vertex holding user data and its outgoing edges."""

    data: Any
    edges: LinkedList = field(default_factory=LinkedList, repr=False)

    def _find(self, to_vertex: Vertex) -> ListItem | None:
        for item in self.edges.items():
            if item.data.to_vertex is to_vertex:
                return item
        return None

    def has_edge(self, to_vertex: Vertex) -> bool:
        """Return whether an edge leads from this vertex to ``to_vertex``."""
        return self._find(to_vertex) is not None

    def edge_to(self, to_vertex: Vertex) -> Edge:
        """Return the edge leading to ``to_vertex``."""
        item = self._find(to_vertex)
        if item is None:
            raise KeyError("no edge leads to the given vertex")
        return item.data

    def add_edge(self, to_vertex: Vertex) -> Edge:
        """Prepend a new edge to ``to_vertex`` and return it."""
        edge = Edge(to_vertex)
        self.edges.insert(edge)
        return edge

    def remove_edge(self, to_vertex: Vertex) -> None:
        """Remove the first edge leading to ``to_vertex``, if there is one."""
        item = self._find(to_vertex)
        if item is not None:
            self.edges.erase(item)


class Graph:
    """Directed graph whose vertices are addressed by position."""

    __slots__ = ("_vertices",)

    def __init__(self, vertex_count: int, data: Any) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._vertices = [Vertex(copy.copy(data)) for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._vertices)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex index {index} out of range")
        return index

    def vertex(self, index: int) -> Vertex:
        """Return the vertex at ``index``."""
        return self._vertices[self._check(index)]

    def add_vertex(self, data: Any) -> Vertex:
        """Append a new vertex holding ``data`` and return it."""
        vertex = Vertex(data)
        self._vertices.append(vertex)
        return vertex

    def remove_vertex(self, index: int) -> None:
        """Remove the vertex at ``index`` and every edge leading to it.

        An index out of range is ignored.
        """
        if not 0 <= index < len(self._vertices):
            return
        target = self._vertices[index]
        for vertex in self._vertices:
            vertex.remove_edge(target)
        del self._vertices[index]

    def vertex_data(self, index: int) -> Any:
        """Return the data of the vertex at ``index``."""
        return self.vertex(index).data

    def set_vertex_data(self, index: int, data: Any) -> None:
        """Replace the data of the vertex at ``index``; out of range is ignored."""
        if 0 <= index < len(self._vertices):
            self._vertices[index].data = data

    def check_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        """Return whether an edge leads from ``from_vertex`` to ``to_vertex``."""
        return from_vertex.has_edge(to_vertex)

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex, weight: int) -> None:
        """Connect the two vertices, or reweigh the edge if it already exists."""
        if not from_vertex.has_edge(to_vertex):
            from_vertex.add_edge(to_vertex)
        from_vertex.edge_to(to_vertex).weight = weight

    def set_edge_weight(self, from_vertex: Vertex, to_vertex: Vertex, weight: int) -> None:
        """Change the weight of an existing edge; a missing edge is ignored."""
        if from_vertex.has_edge(to_vertex):
            from_vertex.edge_to(to_vertex).weight = weight

    def edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> int:
        """Return the weight of the edge between the two vertices."""
        return from_vertex.edge_to(to_vertex).weight

    def remove_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> None:
        """Remove the edge between the two vertices, if there is one."""
        from_vertex.remove_edge(to_vertex)

    def index_of(self, vertex: Vertex) -> int:
        """Return the position of ``vertex`` in the graph."""
        for index, candidate in enumerate(self._vertices):
            if candidate is vertex:
                return index
        raise ValueError("vertex does not belong to this graph")

    def edges(self, vertex: Vertex) -> Iterator[Edge]:
        """Iterate over the outgoing edges of ``vertex``, newest first."""
        return iter(vertex.edges)

    def __repr__(self) -> str:
        return f"Graph({[vertex.data for vertex in self._vertices]!r})"