"""Shortest paths in a weighted graph with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools

from dsakit.graph import Graph, Vertex

UNREACHED = 2**31 - 1


def shortest_path(start: Vertex, end: Vertex, graph: Graph) -> tuple[str, int]:
    """Return the path from *start* to *end* as labels joined by ' --> ' and its length.

    Raises ValueError when an edge has no weight or *end* cannot be reached.
    """
    if start is end:
        return start.data, 0

    distance: dict[Vertex, int] = {vertex: UNREACHED for vertex in graph.vertices}
    distance[start] = 0
    previous: dict[Vertex, Vertex] = {}
    visited: set[Vertex] = set()
    order = itertools.count()
    frontier: list[tuple[int, int, Vertex]] = [(0, next(order), start)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in visited:
            continue
        visited.add(current)
        for edge in current.edges:
            if edge.weight is None:
                raise ValueError(
                    f"edge from {edge.start.data} to {edge.end.data} has no weight"
                )
            candidate = distance[current] + edge.weight
            if candidate < distance.get(edge.end, UNREACHED):
                distance[edge.end] = candidate
                previous[edge.end] = current
                heapq.heappush(frontier, (candidate, next(order), edge.end))

    if end not in previous:
        raise ValueError(f"no path from {start.data} to {end.data}")

    labels = [end.data]
    step = previous.get(end)
    while step is not None:
        labels.append(step.data)
        step = previous.get(step) if step is not start else None
    return " --> ".join(reversed(labels)), distance[end]