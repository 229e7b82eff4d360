"""Graphs of named vertices with optionally weighted, optionally directed edges."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Edge:
    """An edge from *start* to *end*; *weight* is None in unweighted graphs."""

    start: Vertex
    end: Vertex
    weight: int | None = None


@dataclass(eq=False)
class Vertex:
    """A vertex holding a label and its outgoing edges."""

    data: str
    edges: list[Edge] = field(default_factory=list)

    def _add_edge(self, target: Vertex, weight: int | None) -> None:
        self.edges.append(Edge(self, target, weight))

    def _remove_edges_to(self, target: Vertex) -> None:
        self.edges = [edge for edge in self.edges if edge.end is not target]

    def format(self, show_weight: bool = True) -> str:
        """Text listing of the vertex and the vertices its edges lead to."""
        lines = [f"\nVertex:  {self.data}"]
        for edge in self.edges:
            line = f" --> {edge.end.data}"
            if show_weight:
                weight = "Nil" if edge.weight is None else str(edge.weight)
                line += f" ({weight})"
            lines.append(line)
        return "\n".join(lines) + "\n\n"


class Graph:
    """A collection of uniquely labelled vertices joined by edges."""

    def __init__(self, weighted: bool, directed: bool) -> None:
        self.weighted = weighted
        self.directed = directed
        self._vertices: list[Vertex] = []

    @property
    def vertices(self) -> list[Vertex]:
        """The vertices in insertion order."""
        return list(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, data: object) -> bool:
        return any(vertex.data == data for vertex in self._vertices)

    def add_vertex(self, data: str) -> Vertex:
        """Add a vertex labelled *data*; ValueError if the label is taken."""
        if data in self:
            raise ValueError(f"Vertex: {data} already present in graph")
        vertex = Vertex(data)
        self._vertices.append(vertex)
        return vertex

    def add_edge(self, start: Vertex, end: Vertex, weight: int | None = None) -> None:
        """Join *start* to *end*, and back again when the graph is undirected.

        The weight is dropped in an unweighted graph.
        """
        if not self.weighted:
            weight = None
        start._add_edge(end, weight)
        if not self.directed:
            end._add_edge(start, weight)

    def remove_edge(self, start: Vertex, end: Vertex) -> None:
        """Remove every edge from *start* to *end* (both ways when undirected)."""
        start._remove_edges_to(end)
        if not self.directed:
            end._remove_edges_to(start)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove *vertex* and every edge leading to it; ValueError if absent."""
        if not any(existing is vertex for existing in self._vertices):
            raise ValueError(f"Vertex: {vertex.data} not present in graph")
        remaining = [existing for existing in self._vertices if existing is not vertex]
        for existing in remaining:
            existing._remove_edges_to(vertex)
        self._vertices = remaining

    def format(self, show_weight: bool = True) -> str:
        """Text listing of every vertex and its edges."""
        return "".join(vertex.format(show_weight) for vertex in self._vertices)