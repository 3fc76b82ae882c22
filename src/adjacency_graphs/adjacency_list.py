"""Adjacency-list graph representation."""

from __future__ import annotations

from collections.abc import Iterator

from .data import Edge, EdgeStream, Weight
from .exceptions import VertexOutOfRangeError

Neighbor = tuple[int, Weight]


class AdjacencyListGraph:
    """Graph stored as one ordered tuple of ``(neighbor, weight)`` pairs per vertex.

    Neighbors appear in the order their edges appeared in the input. Parallel
    edges are kept, so a vertex may list the same neighbor more than once.
    For undirected graphs every edge is stored at both endpoints, except
    self-loops, which occupy a single slot.

    Space is O(V + E). Testing whether ``(u, v)`` is an edge scans
    ``neighbors(u)`` and costs O(degree(u)).

    Instances are immutable; build them with build_adjacency_list().
    """

    __slots__ = ("_adjacency", "_directed", "_edges")

    def __init__(
        self,
        adjacency: tuple[tuple[Neighbor, ...], ...],
        edges: tuple[Edge, ...],
        directed: bool,
    ):
        self._adjacency = adjacency
        self._edges = edges
        self._directed = directed

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of stored edges, counting parallel edges and self-loops once each."""
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._adjacency)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertex_count={self.vertex_count}, "
            f"edge_count={self.edge_count}, directed={self._directed})"
        )

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self._adjacency):
            raise VertexOutOfRangeError(
                f"Vertex {v} outside the valid range [0, {len(self._adjacency)})",
                vertex=v,
                vertex_count=len(self._adjacency),
            )

    def neighbors(self, v: int) -> tuple[Neighbor, ...]:
        """Return the ``(neighbor, weight)`` pairs of vertex v in input order.

        Raises:
            VertexOutOfRangeError: If v is not in ``[0, vertex_count)``.
        """
        self._check_vertex(v)
        return self._adjacency[v]

    def degree(self, v: int) -> int:
        """Return ``len(neighbors(v))`` (the out-degree for directed graphs)."""
        return len(self.neighbors(v))

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if v appears in u's neighbor list. O(degree(u))."""
        self._check_vertex(v)
        return any(neighbor == v for neighbor, _ in self.neighbors(u))

    def weight(self, u: int, v: int) -> Weight | None:
        """Return the weight of edge (u, v), or None if there is none.

        With parallel edges the last one in input order wins, which matches the
        value the adjacency matrix holds for the same cell.
        """
        self._check_vertex(v)
        found: Weight | None = None
        for neighbor, w in self.neighbors(u):
            if neighbor == v:
                found = w
        return found

    def edges(self) -> tuple[Edge, ...]:
        """Return every stored edge once, in input order."""
        return self._edges


def build_adjacency_list(stream: EdgeStream) -> AdjacencyListGraph:
    """Build an AdjacencyListGraph from a parsed edge stream.

    Args:
        stream: Validated edge stream. It is only read, never modified.

    Returns:
        A new, independent AdjacencyListGraph.

    Example:
        >>> from adjacency_graphs.parser import parse_edge_stream_string
        >>> graph = build_adjacency_list(parse_edge_stream_string("3 2\\n0 1\\n1 2\\n"))
        >>> [graph.degree(v) for v in graph]
        [1, 2, 1]
    """
    adjacency: list[list[Neighbor]] = [[] for _ in range(stream.vertex_count)]
    for edge in stream.edges:
        adjacency[edge.u].append((edge.v, edge.weight))
        if not stream.directed and not edge.is_self_loop:
            adjacency[edge.v].append((edge.u, edge.weight))

    return AdjacencyListGraph(
        adjacency=tuple(tuple(neighbors) for neighbors in adjacency),
        edges=tuple(stream.edges),
        directed=stream.directed,
    )
