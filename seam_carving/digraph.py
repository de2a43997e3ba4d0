"""
Edge-weighted directed graph.

Minimal graph structure used as scaffolding for seam search: vertices are
the integers 0..V-1 and each vertex keeps its outgoing edges in insertion
order. Edges can only be added, never removed.
"""

import math
from typing import Iterator, List

from .errors import InvalidArgumentError, OutOfBoundsError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class DirectedEdge:
    """Immutable weighted arc from_vertex -> to_vertex."""

    __slots__ = ('_from', '_to', '_weight')

    def __init__(self, from_vertex: int, to_vertex: int, weight: float):
        if not _is_int(from_vertex) or not _is_int(to_vertex):
            raise InvalidArgumentError(
                f"Vertices must be ints, got {from_vertex!r} -> {to_vertex!r}")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) \
                or not math.isfinite(weight):
            raise InvalidArgumentError(f"Weight must be a finite number, got {weight!r}")
        if from_vertex < 0 or to_vertex < 0 or weight < 0:
            raise InvalidArgumentError(
                f"Vertices and weight must be non-negative, got "
                f"{from_vertex} -> {to_vertex} ({weight})")

        self._from = from_vertex
        self._to = to_vertex
        self._weight = float(weight)

    @property
    def from_vertex(self) -> int:
        return self._from

    @property
    def to_vertex(self) -> int:
        return self._to

    @property
    def weight(self) -> float:
        return self._weight

    def __eq__(self, other):
        if not isinstance(other, DirectedEdge):
            return NotImplemented
        return (self._from, self._to, self._weight) == (other._from, other._to, other._weight)

    def __hash__(self):
        return hash((self._from, self._to, self._weight))

    def __repr__(self):
        return f"DirectedEdge({self._from}, {self._to}, {self._weight!r})"

    def __str__(self):
        return f"{self._from} -> {self._to} ({self._weight:g})"


class EdgeWeightedDigraph:
    """Directed graph on vertices 0..vertex_count-1 with weighted edges."""

    def __init__(self, vertex_count: int):
        if not _is_int(vertex_count) or vertex_count < 0:
            raise InvalidArgumentError(
                f"Vertex count must be a non-negative int, got {vertex_count!r}")
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._adj: List[List[DirectedEdge]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check_vertex(self, v) -> None:
        if not _is_int(v) or not 0 <= v < self._vertex_count:
            raise OutOfBoundsError(f"Vertex {v!r} outside [0, {self._vertex_count})")

    def add_edge(self, edge: DirectedEdge) -> None:
        """Append edge to the adjacency list of its origin."""
        if not isinstance(edge, DirectedEdge):
            raise InvalidArgumentError(f"Expected a DirectedEdge, got {edge!r}")
        self._check_vertex(edge.from_vertex)
        self._check_vertex(edge.to_vertex)
        self._adj[edge.from_vertex].append(edge)
        self._edge_count += 1

    def adjacent(self, v: int) -> List[DirectedEdge]:
        """
        Outgoing edges of v in insertion order.

        The returned list is the graph's own storage; callers must not modify it.
        """
        self._check_vertex(v)
        return self._adj[v]

    def edges(self) -> Iterator[DirectedEdge]:
        for adj in self._adj:
            yield from adj

    def __str__(self):
        lines = [f"EdgeWeightedDigraph with {self._vertex_count} vertices "
                 f"and {self._edge_count} edges:"]
        for v, adj in enumerate(self._adj):
            lines.append(f"  {v}: " + ", ".join(str(e) for e in adj))
        return "\n".join(lines)
