"""Minimum spanning tree of a weighted graph."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from algokit.graph import Graph

_SAMPLE_VERTEX_COUNT = 6
_SAMPLE_EDGES = (
    (0, 1, 6), (0, 2, 1), (0, 3, 5), (1, 2, 5), (2, 3, 5),
    (1, 4, 3), (2, 4, 6), (2, 5, 4), (4, 5, 6), (3, 5, 2),
)


class WeightedEdge(NamedTuple):
    """An edge between two vertex indices."""

    source: int
    target: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges chosen for a spanning tree, in the order they were chosen."""

    edges: tuple[WeightedEdge, ...]

    @property
    def weight(self) -> int:
        """Total weight of the chosen edges."""
        return sum(edge.weight for edge in self.edges)


def collect_edges(graph: Graph) -> list[WeightedEdge]:
    """List every edge of ``graph`` by vertex index, vertex by vertex."""
    return [
        WeightedEdge(index, graph.index_of(edge.to_vertex), edge.weight)
        for index in range(len(graph))
        for edge in graph.edges(graph.vertex(index))
    ]


class _Components:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, vertex: int) -> int:
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[vertex] != root:
            self._parent[vertex], vertex = root, self._parent[vertex]
        return root

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


def spanning_tree(vertex_count: int, edges: Iterable[Sequence[int]]) -> SpanningTree:
    """Pick a minimum spanning forest from ``edges``.

    Edges are taken in order of weight. A first pass accepts every edge that
    reaches a vertex not seen before; a second pass joins the resulting
    fragments with the lightest remaining edges.
    """
    ordered = sorted((WeightedEdge(*edge) for edge in edges), key=lambda edge: edge.weight)
    for edge in ordered:
        for end in (edge.source, edge.target):
            if not 0 <= end < vertex_count:
                raise ValueError(f"edge {edge} names vertex {end} outside 0..{vertex_count - 1}")

    components = _Components(vertex_count)
    seen: set[int] = set()
    chosen: list[WeightedEdge] = []
    deferred: list[WeightedEdge] = []

    for edge in ordered:
        if edge.source == edge.target:
            continue
        if edge.source in seen and edge.target in seen:
            deferred.append(edge)
            continue
        seen.update((edge.source, edge.target))
        components.union(edge.source, edge.target)
        chosen.append(edge)

    for edge in deferred:
        if components.union(edge.source, edge.target):
            chosen.append(edge)

    return SpanningTree(tuple(chosen))


def format_report(tree: SpanningTree) -> str:
    """Render the chosen edges and the total weight as text."""
    lines = ["All MST edges [source - destination = weight]"]
    lines.extend(f"{edge.source} - {edge.target} = {edge.weight}" for edge in tree.edges)
    lines.append("")
    lines.append(f"Minimum spanning tree weight: {tree.weight}")
    return "\n".join(lines) + "\n"


def _sample_graph() -> Graph:
    graph = Graph(_SAMPLE_VERTEX_COUNT, 0)
    for index in range(_SAMPLE_VERTEX_COUNT):
        graph.set_vertex_data(index, index)
    for source, target, weight in _SAMPLE_EDGES:
        graph.add_edge(graph.vertex(source), graph.vertex(target), weight)
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimum spanning tree of the built-in sample graph."""
    parser = argparse.ArgumentParser(
        prog="mst", description="Print the minimum spanning tree of a sample graph."
    )
    parser.parse_args(argv)
    graph = _sample_graph()
    tree = spanning_tree(len(graph), collect_edges(graph))
    print(format_report(tree), end="")
    return 0