"""
Topological ordering and single-source shortest paths on acyclic digraphs.

Relaxing every vertex's outgoing edges in topological order settles each
vertex's distance before it is used as a relaxation source, so a single
O(V + E) pass suffices and no priority queue is needed.

Both classes assume the graph is acyclic. Nothing checks this unless
TopologicalSort is asked to with check_acyclic=True; on a cyclic graph the
resulting order (and therefore any shortest-path result) is unspecified.
"""

import math
from typing import List, Optional

from .digraph import DirectedEdge, EdgeWeightedDigraph
from .errors import InvalidArgumentError, OutOfBoundsError


class TopologicalSort:
    """
    Reverse depth-first postorder of a digraph.

    Roots are tried in ascending vertex order and edges are followed in
    insertion order, so the order is deterministic for a given graph.
    """

    def __init__(self, digraph: EdgeWeightedDigraph, check_acyclic: bool = False):
        n = digraph.vertex_count
        marked = [False] * n
        on_stack = [False] * n
        postorder = []

        for root in range(n):
            if marked[root]:
                continue

            # Explicit stack of (vertex, edge iterator) so deep graphs
            # don't hit the recursion limit; visit order matches recursive DFS.
            marked[root] = True
            on_stack[root] = True
            stack = [(root, iter(digraph.adjacent(root)))]

            while stack:
                v, edges = stack[-1]
                for edge in edges:
                    w = edge.to_vertex
                    if not marked[w]:
                        marked[w] = True
                        on_stack[w] = True
                        stack.append((w, iter(digraph.adjacent(w))))
                        break
                    if check_acyclic and on_stack[w]:
                        raise InvalidArgumentError(
                            f"Digraph has a cycle through edge {edge}")
                else:
                    stack.pop()
                    on_stack[v] = False
                    postorder.append(v)

        postorder.reverse()
        self._order = postorder

    def order(self) -> List[int]:
        """Vertices in topological order (a fresh list on every call)."""
        return list(self._order)


class AcyclicShortestPath:
    """
    Shortest paths from a single source in an edge-weighted DAG.

    Args:
        digraph: Acyclic edge-weighted digraph
        source: Source vertex
    """

    def __init__(self, digraph: EdgeWeightedDigraph, source: int):
        n = digraph.vertex_count
        if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < n:
            raise OutOfBoundsError(f"Source vertex {source!r} outside [0, {n})")

        self._source = source
        self._dist_to = [math.inf] * n
        self._edge_to: List[Optional[DirectedEdge]] = [None] * n
        self._dist_to[source] = 0.0

        for v in TopologicalSort(digraph).order():
            for edge in digraph.adjacent(v):
                self._relax(edge)

    def _relax(self, edge: DirectedEdge) -> None:
        v, w = edge.from_vertex, edge.to_vertex
        candidate = self._dist_to[v] + edge.weight
        if candidate < self._dist_to[w]:
            self._dist_to[w] = candidate
            self._edge_to[w] = edge

    @property
    def source(self) -> int:
        return self._source

    def _check_vertex(self, v) -> None:
        n = len(self._dist_to)
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < n:
            raise OutOfBoundsError(f"Vertex {v!r} outside [0, {n})")

    def dist_to(self, v: int) -> float:
        """Length of the shortest path to v (inf when v is unreachable)."""
        self._check_vertex(v)
        return self._dist_to[v]

    def has_path_to(self, v: int) -> bool:
        self._check_vertex(v)
        return self._dist_to[v] < math.inf

    def path_to(self, v: int) -> List[DirectedEdge]:
        """
        Edges of the shortest path from the source to v, in travel order.

        Returns an empty list when v is unreachable or is the source itself.
        """
        self._check_vertex(v)
        path = []
        edge = self._edge_to[v]
        while edge is not None:
            path.append(edge)
            edge = self._edge_to[edge.from_vertex]
        path.reverse()
        return path
